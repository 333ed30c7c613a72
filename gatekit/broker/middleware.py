import logging
from typing import Any

from faststream import BaseMiddleware
from faststream.message import StreamMessage
from faststream.types import AsyncFuncAny

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseMiddleware):
    """Expose each consumed message's correlation id as ``Context("correlation_id")``.

    Gate nodes publish what they emit under the id of the value that produced
    it, so a consumer can tie gated output back to its source stream.
    """

    async def consume_scope(
        self,
        call_next: AsyncFuncAny,
        msg: StreamMessage[Any],
    ) -> Any:
        logger.debug("Consuming message correlation_id=%s", msg.correlation_id)
        with self.context.scope("correlation_id", msg.correlation_id):
            return await super().consume_scope(call_next, msg)

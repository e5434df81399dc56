"""Streaming package public surface.

`deepseek_client.streaming` groups SSE decoding, the background reader and
the consumer iterator returned by ``DeepSeekClient.chat_stream``.
"""

from .sse import FrameKind, SseFrame, decode_chat_response, decode_sse_line, parse_frame, strip_data_prefix
from .stream_state import StreamState
from .stream_metrics import StreamMetrics
from .producer import StreamProducer
from .choice_stream import ChoiceStream, accumulate_content

__all__ = [
    "FrameKind",
    "SseFrame",
    "decode_chat_response",
    "decode_sse_line",
    "parse_frame",
    "strip_data_prefix",
    "StreamState",
    "StreamMetrics",
    "StreamProducer",
    "ChoiceStream",
    "accumulate_content",
]

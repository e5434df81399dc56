"""DeepSeek chat completion client.

Public surface:
- :class:`DeepSeekClient`: HTTP wrapper (model listing, blocking and
  streaming chat).
- :class:`ChoiceStream`: cancellable iterator returned by streaming calls.
- :class:`DeepSeekChatClient`: vendor-neutral chat adapter.
- Wire models, error taxonomy, cancellation and configuration helpers.
"""

from .cancellation import CancellationToken, CancelledError
from .chat import (
    ChatClient,
    ChatClientMetadata,
    ChatClientResponse,
    ChatFinishReason,
    ChatMessage,
    ChatOptions,
    ChatResponseUpdate,
    ChatRole,
    DeepSeekChatClient,
    SupportsStreamingResponse,
    UsageDetails,
)
from .client import DeepSeekClient
from .config import get_client_config
from .constants import (
    BASE_ADDRESS,
    COMPLETION_ENDPOINT,
    MODEL_CHAT,
    MODEL_REASONER,
    MODELS_ENDPOINT,
    STREAM_DONE_SIGN,
)
from .errors import ErrorCode, ProviderError, StreamDecodeError
from .models import (
    ChatRequest,
    ChatResponse,
    Choice,
    LogprobContent,
    Logprobs,
    Message,
    Model,
    ModelResponse,
    TopLogprob,
    Usage,
)
from .streaming import ChoiceStream, StreamMetrics, StreamState

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DeepSeekClient",
    "ChoiceStream",
    "StreamState",
    "StreamMetrics",
    "DeepSeekChatClient",
    "ChatClient",
    "SupportsStreamingResponse",
    "ChatClientMetadata",
    "ChatClientResponse",
    "ChatFinishReason",
    "ChatMessage",
    "ChatOptions",
    "ChatResponseUpdate",
    "ChatRole",
    "UsageDetails",
    "CancellationToken",
    "CancelledError",
    "ErrorCode",
    "ProviderError",
    "StreamDecodeError",
    "get_client_config",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "LogprobContent",
    "Logprobs",
    "Message",
    "Model",
    "ModelResponse",
    "TopLogprob",
    "Usage",
    "BASE_ADDRESS",
    "COMPLETION_ENDPOINT",
    "MODELS_ENDPOINT",
    "STREAM_DONE_SIGN",
    "MODEL_CHAT",
    "MODEL_REASONER",
]

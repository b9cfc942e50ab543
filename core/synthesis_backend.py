from abc import ABC, abstractmethod


class SynthesisBackend(ABC):
    """Remote speech synthesis reached over an opaque request/response channel.

    ``synthesize`` resolves to ``{"url": ...}`` on success or ``{"error": ...}``
    on failure. Callers must treat any response without ``url`` as a failure.
    """

    @abstractmethod
    async def synthesize(self, text):
        raise NotImplementedError

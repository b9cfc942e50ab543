GENERIC_SYNTHESIS_ERROR = "Speech synthesis failed."


class SynthesisFailure(Exception):
    def __init__(self, message=None, title=None):
        super().__init__(message or GENERIC_SYNTHESIS_ERROR)
        self.title = title


class StaleResponse(Exception):
    """A synthesis response arrived after the displayed poem changed."""

    def __init__(self, title, token, current_token):
        super().__init__(f"Discarding response for stale title {title!r} (token {token} != {current_token})")
        self.title = title
        self.token = token
        self.current_token = current_token


class PreferenceParseFailure(ValueError):
    def __init__(self, key, raw):
        super().__init__(f"Malformed persisted value for {key!r}: {raw!r}")
        self.key = key
        self.raw = raw


class AudioDeviceError(RuntimeError):
    pass

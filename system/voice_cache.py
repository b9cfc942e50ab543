import asyncio

from core.errors import AudioDeviceError, StaleResponse, SynthesisFailure


class VoiceCache:
    """Lazily synthesizes the current title and replays the cached audio.

    At most one synthesis request is in flight per title: the session slot is
    marked pending before the remote call is issued. Responses are matched to
    the title token captured at request time; a mismatch means the poem changed
    and the response is dropped.
    """

    def __init__(self, state, backend, device, on_error=None, debug=False):
        self.state = state
        self.backend = backend
        self.device = device
        self.on_error = on_error
        self.debug = debug
        self._loaded_url = None

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][VoiceCache] {message}")

    def set_muted(self, muted):
        self.device.set_muted(bool(muted))

    def reset(self):
        state = self.state
        state.title_token += 1
        state.voice_resource = None
        state.voice_pending = None
        self._loaded_url = None
        self.device.stop()
        self.device.unload()
        self.debug_log(f"Reset voice slot (token={state.title_token})")

    async def request_playback(self, title=None):
        state = self.state
        if title is None:
            title = state.current_title
        if state.is_muted:
            self.debug_log("Muted; playback request ignored")
            return
        if not title or title != state.current_title:
            self.debug_log(f"Ignoring playback for non-current title {title!r}")
            return

        if state.voice_resource is not None:
            self._play_from_start(state.voice_resource)
            return

        if state.voice_pending is not None:
            self.debug_log("Synthesis already pending; waiting on it")
            await asyncio.shield(state.voice_pending)
            return

        pending = asyncio.get_running_loop().create_future()
        state.voice_pending = pending
        token = state.title_token
        try:
            url = await self._synthesize(title, token)
        except StaleResponse as exc:
            self.debug_log(str(exc))
        except SynthesisFailure as exc:
            self._report(exc)
        else:
            state.voice_pending = None
            state.voice_resource = url
            if state.is_muted:
                self.debug_log("Muted while synthesizing; cached without playing")
                self._load(url)
            else:
                self._play_from_start(url)
        finally:
            if state.voice_pending is pending:
                state.voice_pending = None
            if not pending.done():
                pending.set_result(None)

    async def _synthesize(self, title, token):
        self.debug_log(f"Requesting synthesis for {title!r}")
        failure = None
        response = None
        try:
            response = await self.backend.synthesize(title)
        except Exception as exc:
            failure = exc

        if token != self.state.title_token:
            raise StaleResponse(title, token, self.state.title_token)
        if failure is not None:
            raise SynthesisFailure(str(failure) or None, title=title) from failure

        url = response.get("url") if isinstance(response, dict) else None
        if not url:
            error = response.get("error") if isinstance(response, dict) else None
            raise SynthesisFailure(error, title=title)
        return url

    def _load(self, url):
        # The device must hold the current title's audio before any replay.
        try:
            if self._loaded_url != url:
                self.device.load(url)
                self._loaded_url = url
        except AudioDeviceError as exc:
            self._device_failed(exc)
            return False
        return True

    def _play_from_start(self, url):
        if not self._load(url):
            return
        try:
            self.device.play_from_start()
        except AudioDeviceError as exc:
            self._device_failed(exc)

    def _device_failed(self, exc):
        self.state.voice_resource = None
        self._loaded_url = None
        self._report(SynthesisFailure(f"Unable to play synthesized audio: {exc}", title=self.state.current_title))

    def _report(self, failure):
        self.debug_log(f"Synthesis failed: {failure}")
        if self.on_error is not None:
            self.on_error(failure)

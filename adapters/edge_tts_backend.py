import hashlib
import os
import tempfile
from pathlib import Path

import edge_tts

from core.synthesis_backend import SynthesisBackend

DEFAULT_VOICE = "zh-CN-XiaoxiaoNeural"


def default_cache_dir():
    return Path(tempfile.gettempdir()) / "versetab_voice"


class EdgeTTSBackend(SynthesisBackend):
    """Synthesizes text with Microsoft Edge's online voices into mp3 files.

    Failures never raise; they come back as ``{"error": message}`` so the
    caller sees the same shape as a remote message channel.
    """

    def __init__(self, voice=DEFAULT_VOICE, cache_dir=None, debug=False):
        self.voice = voice or DEFAULT_VOICE
        self.cache_dir = Path(cache_dir) if cache_dir else default_cache_dir()
        self.debug = debug

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][EdgeTTS] {message}")

    def cache_path(self, text):
        digest = hashlib.sha1(f"{self.voice}\n{text}".encode("utf-8")).hexdigest()[:20]
        return self.cache_dir / f"title_{digest}.mp3"

    async def synthesize(self, text):
        text = (text or "").strip()
        if not text:
            return {"error": "Nothing to read aloud."}

        out_path = self.cache_path(text)
        if out_path.exists() and out_path.stat().st_size > 0:
            self.debug_log(f"Reusing {out_path.name}")
            return {"url": str(out_path)}

        tmp_path = None
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            # Each request writes its own partial file; os.replace publishes it atomically.
            fd, tmp_name = tempfile.mkstemp(dir=str(out_path.parent), prefix=f"{out_path.stem}.", suffix=".part")
            os.close(fd)
            tmp_path = Path(tmp_name)
            communicate = edge_tts.Communicate(text, self.voice)
            await communicate.save(str(tmp_path))
            if not tmp_path.exists() or tmp_path.stat().st_size <= 0:
                return {"error": "Speech service returned no audio."}
            os.replace(str(tmp_path), str(out_path))
        except Exception as exc:
            self.debug_log(f"Synthesis failed for {text!r}: {exc}")
            return {"error": f"Speech service error: {exc}"}
        finally:
            try:
                if tmp_path is not None and tmp_path.exists():
                    tmp_path.unlink()
            except OSError as exc:
                self.debug_log(f"Could not remove {tmp_path}: {exc}")
        self.debug_log(f"Wrote {out_path.name}")
        return {"url": str(out_path)}

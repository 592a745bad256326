import os
from dataclasses import dataclass

DEFAULT_PROMPT = "user> "
DEFAULT_HISTORY_FILE = "repl.history"
STEPS = (0, 1)


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    history_file: str | None = DEFAULT_HISTORY_FILE
    step: int = 1
    debug: bool = False

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "ReplConfig":
        """Build a config from MAL_* variables and DEBUG=true."""
        env = os.environ if environ is None else environ
        cfg = cls()
        if "MAL_PROMPT" in env:
            cfg.prompt = env["MAL_PROMPT"]
        if "MAL_HISTORY_FILE" in env:
            cfg.history_file = env["MAL_HISTORY_FILE"] or None
        if "MAL_STEP" in env:
            step = int(env["MAL_STEP"])
            if step not in STEPS:
                raise ValueError(f"unknown step: {step}")
            cfg.step = step
        cfg.debug = env.get("DEBUG") == "true"
        return cfg

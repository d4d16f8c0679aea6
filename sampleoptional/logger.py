from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any


_LEVELS = {"VERBOSE": 5, "DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Line-oriented logger writing to stderr, as plain text or JSON."""

    def __init__(self, name: str = "sampleoptional", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def log(self, level: str, msg: str, **fields: Any) -> None:
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        data: Dict[str, Any] = {
            "ts": ts,
            "name": self.name,
            "level": level,
            "msg": msg,
        }
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        # sys.stderr is resolved per call so redirect_stderr works
        if self.json_output:
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def verbose(self, msg: str, **fields: Any) -> None: self.log("VERBOSE", msg, **fields)
    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .option import Option, of_nullable


# Computer -> Soundcard -> USB; every link may be missing.

@dataclass
class USB:
    version: Optional[str] = None

    def get_version(self) -> Optional[str]: return self.version
    def set_version(self, version: Optional[str]) -> None: self.version = version
    def version_option(self) -> Option[str]: return of_nullable(self.version)


@dataclass
class Soundcard:
    description: str
    usb: Optional[USB] = None

    def get_usb(self) -> Optional[USB]: return self.usb
    def set_usb(self, usb: Optional[USB]) -> None: self.usb = usb
    def usb_option(self) -> Option[USB]: return of_nullable(self.usb)


@dataclass
class Computer:
    soundcard: Optional[Soundcard] = None

    def get_soundcard(self) -> Optional[Soundcard]: return self.soundcard
    def set_soundcard(self, soundcard: Optional[Soundcard]) -> None: self.soundcard = soundcard
    def soundcard_option(self) -> Option[Soundcard]: return of_nullable(self.soundcard)

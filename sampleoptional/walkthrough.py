"""
Manual ``None`` checks versus Option, step by step.

Each step is a small function so it can be called and tested on its own;
``run`` strings them together and logs what every step produced.
"""
from __future__ import annotations
from typing import Optional

from .hardware import Computer, Soundcard, USB
from .logger import ConsoleLogger
from .option import Option, empty, of, of_nullable


DEFAULT_DESCRIPTION = "Default soundcard"


def usb_version_unchecked(computer: Computer) -> Optional[str]:
    # AttributeError as soon as a link is missing
    return computer.get_soundcard().get_usb().get_version()  # type: ignore[union-attr]


def usb_version_checked(computer: Optional[Computer]) -> Optional[str]:
    if computer is not None:
        soundcard = computer.get_soundcard()
        if soundcard is not None:
            usb = soundcard.get_usb()
            if usb is not None:
                return usb.get_version()
    return None


def usb_version(computer: Optional[Computer]) -> Option[str]:
    return (
        of_nullable(computer)
        .flat_map(Computer.soundcard_option)
        .flat_map(Soundcard.usb_option)
        .flat_map(USB.version_option)
    )


def soundcard_or_default(computer: Computer, description: str = DEFAULT_DESCRIPTION) -> Soundcard:
    return of_nullable(computer.get_soundcard()).or_else(Soundcard(description))


def require_soundcard(computer: Computer) -> Soundcard:
    return of_nullable(computer.get_soundcard()).or_else_throw(
        lambda: RuntimeError("computer has no soundcard")
    )


def is_usb3(usb: Optional[USB]) -> bool:
    return (
        of_nullable(usb)
        .filter(lambda u: (u.get_version() or "").casefold() == "3.0")
        .is_present()
    )


def run(logger: Optional[ConsoleLogger] = None) -> None:
    log = logger or ConsoleLogger()

    # the old way: chained getters, then nested guards
    bare = Computer()
    try:
        usb_version_unchecked(bare)
    except AttributeError as ex:
        log.warn("unchecked chain failed", error=type(ex).__name__)
    log.verbose("checked chain", version=usb_version_checked(bare))

    # the same navigation through Option
    full = Computer(Soundcard("Onboard", USB("3.0")))
    log.info("optional chain", bare=usb_version(bare), full=usb_version(full))

    # creating Option values
    soundcard = Soundcard("")
    log.debug("created", empty=empty(), of=of(soundcard), of_nullable=of_nullable(None))

    # doing something only when a value is present
    optional_soundcard = of_nullable(soundcard)
    if optional_soundcard.is_present():
        log.info("present via is_present", soundcard=optional_soundcard.get())
    optional_soundcard.if_present(lambda sc: log.info("present via if_present", soundcard=sc))

    # defaults and lazily built errors
    mine = Computer(Soundcard("My Soundcard"))
    log.info("or_else", mine=soundcard_or_default(mine).description, bare=soundcard_or_default(bare).description)
    log.info("or_else_throw", soundcard=require_soundcard(mine).description)

    # filtering on a property
    for usb in (USB(), USB("2.0"), USB("3.0")):
        of_nullable(usb).filter(is_usb3).if_present_or_else(
            lambda u: log.info("ok", version=u.get_version()),
            lambda: log.debug("not a 3.0 usb", version=usb.get_version()),
        )

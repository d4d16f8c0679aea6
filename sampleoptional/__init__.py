from .errors import OptionError, NullValueError, NoSuchValueError
from .option import Option, Some, NONE, empty, of, of_nullable
from .hardware import Computer, Soundcard, USB
from .logger import ConsoleLogger
from .walkthrough import (
    usb_version,
    usb_version_checked,
    usb_version_unchecked,
    soundcard_or_default,
    require_soundcard,
    is_usb3,
    run,
)

from .logger import ConsoleLogger
from .walkthrough import run


def main() -> int:
    run(ConsoleLogger(level="VERBOSE"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

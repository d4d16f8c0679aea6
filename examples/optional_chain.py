"""
Safe navigation over Computer -> Soundcard -> USB with Option.

Run: python examples/optional_chain.py
"""
from sampleoptional import Computer, Soundcard, USB, ConsoleLogger, usb_version, of_nullable


def main():
    log = ConsoleLogger(name="example")

    computers = [
        Computer(),
        Computer(Soundcard("No usb")),
        Computer(Soundcard("Usb, no version", USB())),
        Computer(Soundcard("Full", USB("3.0"))),
    ]
    for c in computers:
        desc = c.soundcard_option().map(lambda sc: sc.description).or_else("<none>")
        log.info("usb version", soundcard=desc, version=usb_version(c).or_else("UNKNOWN"))

    # set a missing link later and navigate again
    c = computers[1]
    c.get_soundcard().set_usb(USB("2.0"))  # type: ignore[union-attr]
    of_nullable(c).flat_map(Computer.soundcard_option).flat_map(Soundcard.usb_option).if_present(
        lambda u: log.info("usb attached", version=u.get_version())
    )


if __name__ == "__main__":
    main()

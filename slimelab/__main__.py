"""Entry point for Slimes Lab."""

from slimelab.app import SlimeLabApp


def main() -> None:
    app = SlimeLabApp()
    app.run()


if __name__ == "__main__":
    main()

"""sanitize_filenames CLI entry point"""

from sanitize_filenames.cli import app


def main():
    app(prog_name="sanitize-filenames")


if __name__ == "__main__":
    main()

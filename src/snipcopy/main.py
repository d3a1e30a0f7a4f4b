#!/usr/bin/env python3

import argparse
import logging
import signal
import sys
from typing import Optional

from snipcopy.clipboard import get_clipboard_writer
from snipcopy.config import Settings
from snipcopy.errors import SnipcopyError
from snipcopy.page import load_document_file
from snipcopy.services.search_index import SearchIndex
from snipcopy.services.snippet_copier import SnippetCopier, copy_snippet, decode_payload
from snipcopy.utils.timers import ThreadingScheduler

logger = logging.getLogger(__name__)


class SnipCopyApp:

    def __init__(self, settings: Settings):
        self.settings = settings
        self.scheduler = ThreadingScheduler()

    def copy_from_page(self, page: str, index: int = 0) -> str:
        host = get_clipboard_writer(self.settings.clipboard_backend)
        document = load_document_file(page, host_clipboard=host)

        copier = SnippetCopier(scheduler=self.scheduler, settings=self.settings)
        copier.initialize(document)

        buttons = copier.buttons(document)
        if not buttons:
            raise SnipcopyError(f"No snippet copy buttons found in {page}")
        if not 0 <= index < len(buttons):
            raise SnipcopyError(
                f"Button index {index} out of range, page has {len(buttons)} button(s)")

        button = buttons[index]
        button.element.click()
        logger.info(f"Button {index}: {button.state.value}")
        return decode_payload(button.encoded_payload)

    def decode(self, payload: str) -> str:
        return copy_snippet(payload, get_clipboard_writer(self.settings.clipboard_backend))

    def wait(self):
        self.scheduler.join_all(timeout=self.settings.revert_delay + 1.0)

    def stop(self):
        self.scheduler.cancel_all()


def show_index(path: str, category: Optional[str], tag: Optional[str]) -> None:
    index = SearchIndex.load(path).filter(category=category, tag=tag)
    for record in index:
        labels = ", ".join(record.categories + record.tags)
        print(f"{record.title} [{labels}]\n  {record.url}")
    print(f"{len(index)} record(s)")


def check_index(path: str) -> None:
    index = SearchIndex.load(path)
    if SearchIndex.loads(index.dumps()) != index:
        raise SnipcopyError(f"{path} does not survive a load/dump round trip")
    print(f"{path}: {len(index)} record(s), categories: {', '.join(index.categories()) or '-'}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="SnipCopy - snippet copy buttons and search store tooling"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Read settings from this .env file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    copy_parser = subparsers.add_parser(
        "copy", help="Click a snippet copy button on a rendered page")
    copy_parser.add_argument("page", help="Rendered HTML page")
    copy_parser.add_argument(
        "-i", "--index",
        type=int,
        default=0,
        help="Which copy button to click (default: 0)"
    )
    copy_parser.add_argument(
        "-b", "--backend",
        type=str,
        default=None,
        help="Clipboard backend: auto, linux, macos, windows, memory"
    )

    decode_parser = subparsers.add_parser(
        "decode", help="Decode a base64 snippet payload and copy it")
    decode_parser.add_argument("payload", help="Base64 payload")
    decode_parser.add_argument(
        "-b", "--backend",
        type=str,
        default=None,
        help="Clipboard backend: auto, linux, macos, windows, memory"
    )

    index_parser = subparsers.add_parser("index", help="Inspect a search store file")
    index_sub = index_parser.add_subparsers(dest="index_command", required=True)

    show_parser = index_sub.add_parser("show", help="List records")
    show_parser.add_argument("store", help="Path to the store file")
    show_parser.add_argument("-c", "--category", default=None)
    show_parser.add_argument("-t", "--tag", default=None)

    check_parser = index_sub.add_parser("check", help="Validate a store file")
    check_parser.add_argument("store", help="Path to the store file")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )

    try:
        settings = Settings.from_env(args.env_file).with_overrides(
            clipboard_backend=getattr(args, "backend", None))
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    app = SnipCopyApp(settings)

    def signal_handler(signum, frame):
        app.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        if args.command == "copy":
            text = app.copy_from_page(args.page, args.index)
            print(f"Copied snippet {args.index} from {args.page}: {len(text)} characters")
            app.wait()
        elif args.command == "decode":
            text = app.decode(args.payload)
            print(f"Copied {len(text)} characters")
        elif args.index_command == "show":
            show_index(args.store, args.category, args.tag)
        else:
            check_index(args.store)
    except (SnipcopyError, NotImplementedError, OSError) as e:
        logger.error(f"{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

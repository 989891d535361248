#!/usr/bin/env python3
"""
GO Transit schedule viewer - Main script
Looks up the current timetable PDF for a line and opens it.

Usage:
    python go_sched.py <line>
    python go_sched.py lakeshore west
    python go_sched.py lw
    python go_sched.py 21
"""

import argparse
import os
import subprocess
import sys
import time

import requests

from download_schedules import (
    SCHEDULES_URL, ScheduleError, download_pdf, find_pdf_link, list_schedules,
)
from line_names import LINE_NAMES, aliases_for, get_normalized_name
from temp_files import TempFile


PDF_FILENAME = "sched.pdf"
# Seconds to give the viewer before the temp file is deleted.
# The viewer may still be loading the file after this; there is no way
# to know when it is done with it.
VIEWER_DELAY = 2.0


def open_file(path) -> None:
    """Open a file with the platform's default application."""
    path = os.fspath(path)
    if sys.platform.startswith('win'):
        os.startfile(path)
    elif sys.platform == 'darwin':
        subprocess.run(['open', path], check=True)
    else:
        subprocess.run(['xdg-open', path], check=True)


def print_lines() -> None:
    print("Known lines:")
    for name, code in LINE_NAMES:
        aliases = ", ".join(a for a in aliases_for(code) if a != name.lower())
        print(f"  • {name} ({code}): {aliases}")


def print_schedules(url: str) -> None:
    schedules = list_schedules(url)
    print(f"Schedules on {url}:")
    for s in schedules:
        print(f"  • {s['label']} [{s['link_text']}]")
        print(f"    URL: {s['url']}")


def show_schedule(name: str, url: str = SCHEDULES_URL, delay: float = VIEWER_DELAY,
                  quiet: bool = False) -> None:
    """
    Resolve a line name to its PDF, download it to a temp file and open it.
    The temp file is removed once the viewer delay has passed.
    """
    name = get_normalized_name(name)
    if not quiet:
        print(f"Getting schedule for {name}")

    pdf_url = find_pdf_link(name, url)
    if not quiet:
        print(f"PDF link: {pdf_url}")

    with TempFile.get(PDF_FILENAME) as temp_file:
        if not quiet:
            print(f"Saving to {temp_file.path}")
        download_pdf(pdf_url, temp_file)

        open_file(temp_file.path)
        time.sleep(delay)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Open the current GO Transit timetable for a line',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python go_sched.py lakeshore west
  python go_sched.py lw
  python go_sched.py 21
  python go_sched.py --list
        """
    )
    parser.add_argument('name', nargs='*', help='Line name, short code or route number')
    parser.add_argument('--list', action='store_true', help='List schedules on the GO website')
    parser.add_argument('--lines', action='store_true', help='List known line names and aliases')
    parser.add_argument('--delay', type=float, default=VIEWER_DELAY,
                        help='Seconds to wait for the viewer before cleanup')
    parser.add_argument('--url', default=SCHEDULES_URL, help='Full-schedules page URL')
    parser.add_argument('-q', '--quiet', action='store_true', help='Minimal output')

    args = parser.parse_args(argv)

    if args.lines:
        print_lines()
        return 0

    try:
        if args.list:
            print_schedules(args.url)
            return 0

        if not args.name:
            print("Usage: sched <name>")
            return 0

        show_schedule(" ".join(args.name), args.url, args.delay, args.quiet)
    except (ScheduleError, requests.RequestException, subprocess.CalledProcessError, OSError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

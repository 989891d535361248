#!/usr/bin/env python3
"""
Find and download GO Transit timetable PDFs from the official website.

The full-schedules page lists every line in a single table:

    <table class="content-page-table">
      <tbody>
        <tr><td><strong>Lakeshore West</strong></td>
            <td><a href="/.../01-18.pdf">01-18</a></td></tr>
        ...

Each row must have a <strong> label and an <a> link. Anything else means
the page layout changed and we stop with a ParseError instead of guessing.
"""

import requests
from bs4 import BeautifulSoup
from urllib.parse import urljoin

from temp_files import TempFile


SCHEDULES_URL = "https://www.gotransit.com/en/trip-planning/seeschedules/full-schedules"
TABLE_SELECTOR = "table.content-page-table"


class ScheduleError(Exception):
    """Base class for schedule lookup failures."""


class ParseError(ScheduleError):
    def __init__(self, message: str = "Unable to parse HTML document"):
        super().__init__(message)


class ScheduleNotFoundError(ScheduleError):
    def __init__(self, name: str):
        super().__init__(f"Schedule not found: {name}")
        self.name = name


def fetch_schedules_page(url: str = SCHEDULES_URL) -> str:
    """
    Fetch the full-schedules page and return its HTML.
    """
    response = requests.get(url)
    response.raise_for_status()
    return response.text


def inner_text(tag) -> str:
    """Tag text with whitespace collapsed, keeping word boundaries between child tags."""
    return " ".join(tag.get_text(" ", strip=True).split())


def table_body_rows(table) -> list:
    """
    Rows of the table body. html.parser keeps the markup as written, so
    a table without an explicit <tbody> has its rows directly under it.
    """
    tbody = table.find('tbody', recursive=False)
    if tbody is not None:
        return tbody.find_all('tr')

    rows = table.find_all('tr', recursive=False)
    if not rows:
        raise ParseError()
    return rows


def iter_schedule_rows(html: str):
    """
    Yield one dict per schedule table row with keys: label, link_text, href.
    Rows are parsed lazily so a bad row after a match is never reached.
    """
    soup = BeautifulSoup(html, 'html.parser')
    table = soup.select_one(TABLE_SELECTOR)
    if table is None:
        raise ParseError()

    for tr in table_body_rows(table):
        key = tr.find('strong')
        link = tr.find('a')
        if key is None or link is None:
            raise ParseError(f"Unexpected schedule row: {tr.get_text(' ', strip=True)!r}")

        yield {
            'label': inner_text(key),
            'link_text': inner_text(link),
            'href': link.get('href'),
        }


def find_pdf_link(name: str, url: str = SCHEDULES_URL) -> str:
    """
    Find the timetable PDF for a normalized line name.
    The bold label is checked before the link text; first matching row wins.
    Returns the absolute PDF URL.
    """
    wanted = name.lower()
    html = fetch_schedules_page(url)

    for row in iter_schedule_rows(html):
        if row['label'].lower() == wanted or row['link_text'].lower() == wanted:
            if not row['href']:
                raise ParseError(f"Schedule link for {row['label']!r} has no href")
            return urljoin(url, row['href'])

    raise ScheduleNotFoundError(name)


def list_schedules(url: str = SCHEDULES_URL) -> list[dict]:
    """
    Return every schedule row on the page, with hrefs made absolute.
    """
    schedules = []
    for row in iter_schedule_rows(fetch_schedules_page(url)):
        if row['href']:
            row['url'] = urljoin(url, row['href'])
        else:
            row['url'] = None
        schedules.append(row)
    return schedules


def download_pdf(url: str, temp_file: TempFile) -> None:
    """
    Download a PDF into temp_file, replacing whatever is there.
    Network and write errors are left for the caller.
    """
    response = requests.get(url)
    response.raise_for_status()

    with temp_file.open_for_write() as f:
        f.write(response.content)

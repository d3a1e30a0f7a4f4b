import base64
import heapq
import itertools

import pytest

from snipcopy.clipboard import MemoryClipboard
from snipcopy.page import load_document
from snipcopy.utils.timers import Scheduler


class VirtualScheduler(Scheduler):
    """Scheduler driven by a manual clock counted in whole milliseconds."""

    def __init__(self):
        self.now = 0
        self._queue = []
        self._counter = itertools.count()

    def call_later(self, delay, callback):
        heapq.heappush(self._queue, (self.now + round(delay * 1000), next(self._counter), callback))

    def pending(self):
        return len(self._queue)

    def advance(self, ms):
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            when, _, callback = heapq.heappop(self._queue)
            self.now = when
            callback()
        self.now = target


def b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


PAGE = """<!doctype html>
<html lang="en">
  <head><title>WSL tricks</title></head>
  <body>
    <article>
      <div class="snippet">
        <button class="snippet-action snippet-action-copy" data-snippet="{first}">Copy</button>
        <pre><code>echo hello</code></pre>
      </div>
      <div class="snippet">
        <button class="snippet-action snippet-action-copy" data-snippet="{second}">Copy</button>
        <pre><code>ls -la</code></pre>
      </div>
      <button class="snippet-action-copy" data-snippet="%%%not-base64%%%">Copy</button>
    </article>
  </body>
</html>
"""


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def page_html():
    return PAGE.format(first=b64("echo hello"), second=b64("ls -la\n"))


@pytest.fixture
def document(page_html, clipboard):
    return load_document(page_html, host_clipboard=clipboard)


STORE = """var store = [{
        "title": "WSL tricks",
        "excerpt":"This post shares some WSL (Windows Subsystem for Linux) tricks. Tip: If you haven’t heard of WSL, you can...","categories": ["wsl"],
        "tags": [],
        "url": "https://uzxmx.github.io/wsl-tricks.html",
        "teaser": null
      },{
        "title": "Redis RDB internals",
        "excerpt":"This post aims to covering how Redis dumps in-memory data into a disk file.","categories": ["redis"],
        "tags": ["internals"],
        "url": "https://uzxmx.github.io/redis-rdb-internals.html",
        "teaser": null
      },{
        "title": "Prometheus TSDB internals",
        "excerpt":"How Prometheus stores samples on disk.","categories": ["prometheus"],
        "tags": ["internals", "tsdb"],
        "url": "https://uzxmx.github.io/prometheus-tsdb-internals.html",
        "teaser": "/assets/images/tsdb.png"
      }]
"""


@pytest.fixture
def store_text():
    return STORE


@pytest.fixture
def store_file(tmp_path, store_text):
    path = tmp_path / "lunr-store.js"
    path.write_text(store_text, encoding="utf-8")
    return path


@pytest.fixture
def encode():
    return b64

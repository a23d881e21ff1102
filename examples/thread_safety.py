"""Thread Safety Example - Sharing Translations Across Threads.

The merged translation collection is built once per process, on the first
lookup. Threads racing on that first lookup block until a single build
finishes and then share its result; afterwards every lookup is a read of
immutable data and needs no locking.

Demonstrates:
1. Concurrent first use (one build, one shared collection)
2. Prepared lookups shared between worker threads

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from translatable import get_translations, prepare_translation, translation

GREETINGS = """\
[greetings.informal]
en = "Hi {user}!"
es = "Hola {user}!"
"""


def _prepare_workdir() -> None:
    workdir = Path(tempfile.mkdtemp())
    (workdir / "translations").mkdir()
    (workdir / "translations" / "greetings.toml").write_text(GREETINGS, encoding="utf-8")
    os.chdir(workdir)


def example_1_concurrent_first_use() -> None:
    """Example 1: Many threads trigger the first build at the same time."""
    print("=" * 60)
    print("Example 1: Concurrent First Use")
    print("=" * 60)

    barrier = threading.Barrier(8)

    def worker(index: int) -> int:
        barrier.wait()
        translation("en", "greetings::informal", {"user": f"worker-{index}"})
        return id(get_translations())

    with ThreadPoolExecutor(max_workers=8) as pool:
        identities = set(pool.map(worker, range(8)))

    print(f"Distinct collections observed: {len(identities)}")
    # Output: Distinct collections observed: 1


def example_2_shared_prepared_lookup() -> None:
    """Example 2: One prepared lookup used from many threads."""
    print("\n" + "=" * 60)
    print("Example 2: Shared Prepared Lookup")
    print("=" * 60)

    greet = prepare_translation("greetings::informal")

    def worker(language: str) -> str:
        user = threading.current_thread().name
        result, errors = greet(language=language, replacements={"user": user})
        return result if not errors else f"failed: {errors[0]}"

    with ThreadPoolExecutor(max_workers=4, thread_name_prefix="reader") as pool:
        for result in pool.map(worker, ["en", "es", "en", "es"]):
            print(result)


if __name__ == "__main__":
    # INFO shows the single "Loaded ... translation(s)" line from the build.
    logging.basicConfig(level=logging.INFO, format="%(threadName)s %(message)s")
    _prepare_workdir()
    example_1_concurrent_first_use()
    example_2_shared_prepared_lookup()

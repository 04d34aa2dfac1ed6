"""Thread safety tests for Tejat.

The lexer holds only immutable state and configuration lives in a
ContextVar. These tests parse concurrently with real threads to catch
shared-state bugs.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from tejat import Lexer, ParseConfig, ParseError, parse, parse_config_context


def _document(n: int) -> str:
    return f"# Doc {n}\n=> /page/{n} Page {n}\n* item {n}\n```\nbody {n}\n```\n"


class TestConcurrentParsing:
    def test_independent_sources(self) -> None:
        expected = {n: parse(_document(n)) for n in range(32)}

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = dict(zip(range(32), pool.map(lambda n: parse(_document(n)), range(32))))

        assert results == expected

    def test_shared_lexer(self) -> None:
        lexer = Lexer(_document(1))
        expected = lexer.parse()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: lexer.parse(), range(32)))

        assert all(result == expected for result in results)

    def test_per_thread_config(self) -> None:
        def worker(detach: bool) -> bool:
            with parse_config_context(ParseConfig(detach=detach)):
                return any(line.is_borrowed for line in parse(_document(0)))

        flags = [n % 2 == 0 for n in range(32)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            borrowed = list(pool.map(worker, flags))

        assert borrowed == [not detach for detach in flags]

    def test_errors_stay_in_their_thread(self) -> None:
        def worker(n: int) -> int:
            source = _document(n)
            if n % 3 == 0:
                source += "```\nunterminated"
            try:
                return len(parse(source))
            except ParseError:
                return -1

        with ThreadPoolExecutor(max_workers=8) as pool:
            counts = list(pool.map(worker, range(30)))

        assert counts == [-1 if n % 3 == 0 else 4 for n in range(30)]


@pytest.mark.parametrize("workers", [2, 16])
def test_many_workers(workers: int) -> None:
    with ThreadPoolExecutor(max_workers=workers) as pool:
        lengths = list(pool.map(lambda n: len(parse(_document(n) * 10)), range(64)))
    assert lengths == [40] * 64

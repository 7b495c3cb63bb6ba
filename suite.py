import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {'tests': []}

PASS_MARK = '✔ pass'
FAIL_MARK = '✖ fail'


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """assertion failure raised by the helpers below."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# keep pytest from collecting the decorator itself
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """raise TestAssertionError unless condition holds."""
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """like assert_that, but reports both values."""
    if not actual == expected:
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "") -> Iterator[None]:
    """the block must raise error_type (or a subclass)."""
    try:
        yield
    except error_type:
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns True if all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()
    failed = 0

    for test_item in _suite_state['tests']:
        try:
            test_item['func']()
            print(f"  {_c.ok}{PASS_MARK}{_c.reset}  {test_item['description']}")
        except Exception as e:
            failed += 1
            print(f"  {_c.fail}{FAIL_MARK}{_c.reset}  {test_item['description']}")
            print(f"    {_c.grey}└─> {type(e).__name__}: {e}{_c.reset}")

    total = len(_suite_state['tests'])
    duration = (time.perf_counter() - start_time) * 1000
    color = _c.ok if failed == 0 else _c.fail
    print(f"\n{color}ran {total} tests in {duration:.2f}ms, {total - failed} passed, {failed} failed{_c.reset}\n")

    # clear tests so several suites can run in one process
    _suite_state['tests'] = []
    return failed == 0

'''
random primitive data for property style tests, built on faker.
'''

from typing import Any, Callable, Dict, List, Optional
from faker import Faker


class SampleGenerator:
    """produces lists of json-friendly primitives."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._providers: Dict[str, Callable[[], Any]] = {
            'int': lambda: self._fake.pyint(min_value=-1000, max_value=1000),
            'float': lambda: self._fake.pyfloat(left_digits=4, right_digits=3),
            'word': self._fake.word,
            'bool': self._fake.pybool,
            'none': lambda: None,
        }

    def primitive(self) -> Any:
        kind = self._fake.random_element(tuple(self._providers))
        return self._providers[kind]()

    def primitive_list(self, max_length: int = 15) -> List[Any]:
        length = self._fake.random_int(min=0, max=max_length)
        return [self.primitive() for _ in range(length)]

    def primitive_lists(self, count: int = 20, max_length: int = 15) -> List[List[Any]]:
        return [self.primitive_list(max_length) for _ in range(count)]


def primitive_lists(count: int = 20, max_length: int = 15, seed: Optional[int] = 42) -> List[List[Any]]:
    """shortcut for a seeded batch of random lists"""
    return SampleGenerator(seed).primitive_lists(count, max_length)

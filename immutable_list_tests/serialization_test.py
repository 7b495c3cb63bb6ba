import json
import suite
from immutable_list import (
    of, from_iterable, from_json, empty, ABSENT, AbstractList,
    ListJSONEncoder, dumps, loads
)
from samples import primitive_lists

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

TEST_DATA = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89]


@test("to_json returns the backing data")
def test_to_json():
    lst = of(1, 2, 3).map(lambda x: x * 2)
    assert_equal(lst.to_json(), [2, 4, 6])
    assert_that(lst.to_json() is lst.to_json(), "should return the cached list")


@test("from_json round trips to_json")
def test_round_trip():
    original = from_iterable(TEST_DATA).set(0, 0).filter(lambda e: e != 5)
    restored = from_json(original.to_json())
    for i in range(len(original)):
        assert_equal(restored.get(i), original.get(i), f"mismatch at {i}")
    assert_equal(len(restored), len(original))


@test("round trip holds for random primitive lists")
def test_round_trip_random():
    for data in primitive_lists(count=30, seed=11):
        original = from_iterable(list(data)).map(lambda e: e)
        restored = from_json(original.to_json())
        assert_equal(list(restored), data)


@test("json text round trip for random primitive lists")
def test_text_round_trip_random():
    for data in primitive_lists(count=30, seed=23):
        restored = loads(dumps(from_iterable(data)))
        assert_that(isinstance(restored, AbstractList), f"unexpected type: {type(restored)}")
        assert_equal(restored.to_json(), data)


@test("dumps encodes lists and holes")
def test_dumps():
    assert_equal(dumps(of(1, 2, 3)), '[1, 2, 3]')
    assert_equal(dumps({'a': of(1, 2).delete(0)}), '{"a": [null, 2]}')
    assert_equal(dumps(empty()), '[]')
    assert_equal(json.dumps(of(of(1), 'x'), cls=ListJSONEncoder), '[[1], "x"]')


@test("dumps still rejects unknown objects")
def test_dumps_unknown():
    with assert_raises(TypeError):
        dumps(object())


@test("loads turns nested arrays into lists")
def test_loads_nested():
    result = loads('{"values": [1, [2, 3]], "name": "x"}')
    values = result['values']
    assert_that(isinstance(values, AbstractList), "outer array")
    assert_that(isinstance(values[1], AbstractList), "inner array")
    assert_equal(values[1].to_json(), [2, 3])
    assert_equal(result['name'], 'x')
    assert_that(values.get(5) is ABSENT, "reads past the end are ABSENT")


if __name__ == "__main__":
    suite.run(title="immutable list serialization test suite")

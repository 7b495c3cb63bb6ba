import suite
from immutable_list import Stream, ABSENT, of

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

words = ['apple', 'banana', 'cherry', 'date']


@test("streams defer work until drained")
def test_stream_lazy():
    seen = []
    stream = Stream.from_iterable([1, 2, 3]).map(lambda x: seen.append(x) or x * 2)
    assert_equal(seen, [], "map should not run on construction")
    assert_equal(stream.to_list(), [2, 4, 6])
    assert_equal(seen, [1, 2, 3])


@test("streams restart on every iteration")
def test_stream_restartable():
    stream = Stream.from_iterable(range(4)).filter(lambda x: x % 2 == 0)
    assert_equal(list(stream), [0, 2])
    assert_equal(list(stream), [0, 2])


@test("from_iterable passes streams through")
def test_stream_identity():
    stream = Stream.from_iterable([1])
    assert_that(Stream.from_iterable(stream) is stream, "should not rewrap")


@test("concat and push append elements")
def test_stream_concat_push():
    stream = Stream.from_iterable([1, 2]).concat([3], (4, 5)).push(6, 7)
    assert_equal(stream.to_list(), [1, 2, 3, 4, 5, 6, 7])


@test("entries pairs elements with indices")
def test_stream_entries():
    assert_equal(Stream.from_iterable(words).entries().to_list(), list(enumerate(words)))


@test("find and find_index")
def test_stream_find():
    stream = Stream.from_iterable(words)
    assert_equal(stream.find(lambda w: w.startswith('c')), 'cherry')
    assert_that(stream.find(lambda w: w.startswith('z')) is ABSENT, "no match should be ABSENT")
    assert_equal(stream.find_index(lambda w: len(w) == 4), 3)
    assert_equal(stream.find_index(lambda w: len(w) == 9), -1)


@test("every, some and includes")
def test_stream_predicates():
    stream = Stream.from_iterable(words)
    assert_that(stream.every(lambda w: isinstance(w, str)), "all strings")
    assert_that(stream.some(lambda w: 'nan' in w), "banana contains nan")
    assert_that(stream.includes('date'), "date included")
    assert_that(not stream.includes('fig'), "fig not included")


@test("join and reduce")
def test_stream_join_reduce():
    stream = Stream.from_iterable([1, None, 3])
    assert_equal(stream.join('-'), '1--3')
    assert_equal(Stream.from_iterable([1, 2, 3]).reduce(lambda a, b: a * b), 6)
    assert_equal(Stream.from_iterable([]).reduce(lambda a, b: a + b, 10), 10)
    with assert_raises(ValueError):
        Stream.from_iterable([]).reduce(lambda a, b: a + b)


@test("for_each visits elements in order")
def test_stream_for_each():
    seen = []
    Stream.from_iterable(words).for_each(seen.append)
    assert_equal(seen, words)


@test("streams over lists read memoized data")
def test_stream_over_list():
    lst = of(1, 2, 3).map(lambda x: x + 1)
    assert_equal(Stream.from_iterable(lst).map(str).to_list(), ['2', '3', '4'])
    assert_that(lst.is_materialized, "reading through a stream materializes the list")


@test("streams share the terminal accessor")
def test_stream_terminal():
    stream = Stream.from_iterable([3, 1, 3])
    assert_equal(stream.to.set(), {1, 3})
    assert_equal(stream.to.count(), 3)
    assert_equal(stream.to.count(lambda x: x == 3), 2)


if __name__ == "__main__":
    suite.run(title="stream adapter test suite")

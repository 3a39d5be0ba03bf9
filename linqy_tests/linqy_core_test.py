import suite
from linqy import Q, from_iterable, from_range, empty, ArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# helper data
numbers = Q(range(1, 11))  # 1 through 10
grades = [59, 82, 70, 56, 92, 98, 85]
nested_data = Q([[1, 2], [3, 4, 5], [], [6]])
pet_owners = [
    {'name': 'higa', 'pets': ['scruffy', 'sam']},
    {'name': 'ashkenazi', 'pets': ['walker', 'sugar']},
    {'name': 'price', 'pets': ['scratches', 'diesel']},
    {'name': 'hines', 'pets': ['dusty']},
]


# --- where ---

@test("where filters elements correctly")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where handles empty result")
def test_where_empty_result():
    assert_that(numbers.where(lambda x: x > 100).to.list() == [], "should return empty list for no matches")


@test("where chains multiple filters")
def test_where_chained():
    result = Q(grades).where(lambda n: n >= 70).where(lambda n: n <= 95).to.list()
    assert_that(result == [82, 70, 92, 85], "both filters should apply in order")


@test("where passes key and origin to callbacks that accept them")
def test_where_key_and_origin():
    seen = []

    def predicate(value, key, origin):
        seen.append((key, origin is source))
        return key % 2 == 0

    source = ['a', 'b', 'c', 'd']
    result = Q(source).where(predicate).to.list()
    assert_that(result == ['a', 'c'], "should filter on even positions")
    assert_that(seen == [(0, True), (1, True), (2, True), (3, True)], "should receive keys and the origin container")


@test("where keeps mapping keys")
def test_where_mapping_keys():
    table = Q({'a': 1, 'b': 2, 'c': 3}).where(lambda v: v >= 2).to.table()
    assert_that(table == {'b': 2, 'c': 3}, "mapping keys should survive filtering")


# --- select ---

@test("select transforms elements")
def test_select_basic():
    squares = numbers.select(lambda x: x * x).to.list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@test("select executes chained projections in order")
def test_select_chained_order():
    result = from_range(1, 5).select(lambda n: n - 1).select(lambda n: n * 2).to.list()
    assert_that(result == [0, 2, 4, 6, 8], "projections should compose left to right")


@test("select with index uses the key argument")
def test_select_with_key():
    result = Q(['a', 'b', 'c']).select(lambda value, key: f"{key}:{value}").to.list()
    assert_that(result == ['0:a', '1:b', '2:c'], "should combine keys with values")


@test("select accepts builtins without signatures")
def test_select_builtin():
    assert_that(Q([1, 2, 3]).select(str).to.list() == ['1', '2', '3'], "str should receive the value only")


@test("select preserves keys for to.table")
def test_select_preserves_keys():
    table = Q({'a': 1, 'b': 2}).select(lambda v: v * 10).to.table()
    assert_that(table == {'a': 10, 'b': 20}, "keys should be kept")


# --- select_many ---

@test("select_many flattens sequences")
def test_select_many_basic():
    flattened = nested_data.select_many(lambda x: x).to.list()
    assert_that(flattened == [1, 2, 3, 4, 5, 6], "should flatten all sublists")


@test("select_many applies a result selector to outer and inner")
def test_select_many_result_selector():
    result = Q(pet_owners).select_many(
        lambda owner: owner['pets'],
        lambda owner, pet: {'owner': owner['name'], 'pet': pet}
    ).where(lambda row: row['pet'].startswith('s')).skip(1).to.list()

    assert_that(result == [
        {'owner': 'higa', 'pet': 'sam'},
        {'owner': 'ashkenazi', 'pet': 'sugar'},
        {'owner': 'price', 'pet': 'scratches'},
    ], "should flatten, filter and skip in order")


@test("select_many drains each inner collection before advancing outer")
def test_select_many_order():
    log = []

    def expand(x):
        log.append(f"outer {x}")
        return [x * 10, x * 10 + 1]

    result = Q([1, 2]).select_many(expand).select(lambda v: log.append(f"inner {v}") or v).to.list()
    assert_that(result == [10, 11, 20, 21], "should flatten in order")
    assert_that(log == ['outer 1', 'inner 10', 'inner 11', 'outer 2', 'inner 20', 'inner 21'],
                "outer should only advance after inner is exhausted")


@test("select_many synthesizes contiguous keys")
def test_select_many_keys():
    table = nested_data.select_many(lambda x: x).to.table()
    assert_that(list(table.keys()) == [0, 1, 2, 3, 4, 5], "keys should be renumbered")


@test("select_many rejects non-container results")
def test_select_many_bad_result():
    assert_raises(ArgumentError, lambda: Q([1]).select_many(lambda x: x).to.list())


# --- skip / take ---

@test("skip and take boundaries")
def test_skip_take_boundaries():
    data = Q(grades)
    assert_that(data.skip(0).to.list() == grades, "skip(0) is a no-op")
    assert_that(data.skip(-3).to.list() == grades, "negative skip is a no-op")
    assert_that(data.take(0).to.list() == [], "take(0) is empty")
    assert_that(data.take(-2).to.list() == [], "negative take is empty")
    assert_that(data.skip(100).to.list() == [], "skipping past the end is empty")
    assert_that(data.take(100).to.list() == grades, "taking past the end returns everything")


@test("skip chained twice")
def test_skip_twice():
    assert_that(Q(grades).skip(3).skip(1).to.list() == [92, 98, 85], "skips should add up")


@test("skip then take")
def test_skip_take():
    assert_that(Q(grades).skip(3).take(2).to.list() == [56, 92], "should window the sequence")


@test("take stops pulling once satisfied")
def test_take_stops_pulling():
    pulled = []
    Q([1, 2, 3, 4, 5]).select(lambda x: pulled.append(x) or x).take(2).to.list()
    assert_that(pulled == [1, 2], "no element after the second should be produced")


# --- skip_while / take_while ---

@test("skip_while bypasses elements while the condition holds")
def test_skip_while():
    data = [56, 59, 70, 82, 85, 92, 98]
    assert_that(Q(data).skip_while(lambda n: n < 80).to.list() == [82, 85, 92, 98], "should drop the leading run")
    assert_that(Q(data).skip_while(lambda n: n >= 0).to.list() == [], "always true drops everything")
    assert_that(Q(data).skip_while(lambda n: n > 100).to.list() == data, "never true keeps everything")


@test("skip_while stops evaluating the predicate after the first failure")
def test_skip_while_predicate_calls():
    calls = []
    Q([1, 2, 5, 1, 2]).skip_while(lambda n: calls.append(n) or n < 3).to.list()
    assert_that(calls == [1, 2, 5], "predicate should not run after the first false")


@test("take_while stops at the first failing element")
def test_take_while():
    result = Q([1, 2, 3, 10, 1, 2]).take_while(lambda n: n < 5).to.list()
    assert_that(result == [1, 2, 3], "should stop at 10 and not resume")


# --- append / prepend / default_if_empty ---

@test("append and prepend add elements at the ends")
def test_append_prepend():
    assert_that(Q([1, 2, 3]).append(4).to.list() == [1, 2, 3, 4], "append should add at the end")
    assert_that(Q([1, 2, 3]).prepend(0).to.list() == [0, 1, 2, 3], "prepend should add at the start")
    assert_that(empty().append('x').to.list() == ['x'], "append to empty")


@test("append keys the element after the largest index")
def test_append_keys():
    table = Q({0: 'a', 'b': 'x', 5: 'c'}).append('d').to.table()
    assert_that(table == {0: 'a', 'b': 'x', 5: 'c', 6: 'd'}, "new key should follow the largest integer key")


@test("prepend renumbers the sequence")
def test_prepend_keys():
    table = Q(['b', 'c']).prepend('a').to.table()
    assert_that(table == {0: 'a', 1: 'b', 2: 'c'}, "keys should be contiguous")


@test("default_if_empty yields the default only for empty sources")
def test_default_if_empty():
    assert_that(empty().default_if_empty(7).to.table() == {0: 7}, "empty yields the default once")
    assert_that(Q([1, 2]).default_if_empty(7).to.list() == [1, 2], "non-empty is unchanged")
    assert_that(empty().default_if_empty().to.list() == [None], "default default is None")


# --- reverse / of_type ---

@test("reverse inverts order")
def test_reverse():
    assert_that(Q('apple').reverse().to.list() == ['e', 'l', 'p', 'p', 'a'], "should reverse a string")


@test("of_type filters by type")
def test_of_type():
    mixed = Q([1, 'a', 2.5, 'b', None])
    assert_that(mixed.of_type(str).to.list() == ['a', 'b'], "should keep strings only")


# --- source adapter ---

@test("from_iterable rejects non containers")
def test_from_iterable_rejects():
    assert_raises(ArgumentError, lambda: from_iterable(42))
    assert_raises(ArgumentError, lambda: Q(None))


@test("from_iterable over a mapping yields its items")
def test_from_iterable_mapping():
    source = {'x': 1, 'y': 2}
    assert_that(Q(source).to.list() == [1, 2], "values in insertion order")
    assert_that(Q(source).to.table() == source, "keys preserved")


@test("wrapping a sequence does not evaluate it")
def test_wrap_sequence_is_lazy():
    calls = []
    inner = Q([1, 2, 3]).select(lambda x: calls.append(x) or x)
    wrapped = from_iterable(inner)
    assert_that(calls == [], "wrapping should not pull anything")
    assert_that(wrapped.where(lambda x: x > 1).to.list() == [2, 3], "the wrapped chain still works")
    assert_that(calls == [1, 2, 3], "pulled only at the terminal call")


@test("from_range rejects negative counts")
def test_from_range_negative():
    assert_raises(ArgumentError, lambda: from_range(1, -1))
    assert_that(from_range(5, 0).to.list() == [], "zero count is empty")
    assert_that(from_range(-2, 4).to.list() == [-2, -1, 0, 1], "range from a negative start")


if __name__ == "__main__":
    suite.run(title="linqy core operations test")

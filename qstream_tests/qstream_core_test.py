import suite
from functools import cmp_to_key
from dgen import from_schema
from qstream import of, of_iterable, empty, from_range

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': {'_qen_provider': 'sequence'},
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
}

# helper data
letters = of("a", "b", "c", "d", "e")
numbers = of_iterable(range(1, 11))  # 1 through 10
nested = of([1, 2], [3, 4, 5], [], [6])


def descending(a, b):
    return (a < b) - (a > b)


def ascending(a, b):
    return (a > b) - (a < b)


# filter() tests

@test("filter keeps matching elements in order")
def test_filter_basic():
    evens = numbers.filter(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], f"should keep even numbers: {evens}")


@test("filter and its complement partition the stream")
def test_filter_partition():
    pred = lambda x: x % 3 == 0
    kept = numbers.filter(pred).to.count()
    dropped = numbers.filter(lambda x: not pred(x)).to.count()
    assert_that(kept + dropped == numbers.to.count(), f"{kept} + {dropped} should be 10")


@test("filter with no matches is empty")
def test_filter_empty_result():
    assert_that(numbers.filter(lambda x: x > 100).to.list() == [], "should be empty")


@test("filter on generated records")
def test_filter_records():
    people = from_schema(person_schema, seed=42).take(30)
    engineers = people.filter(lambda p: p['department'] == 'eng').to.list()
    for person in engineers:
        assert_that(person['department'] == 'eng', "all should be engineers")


# map() tests

@test("map applies the mapper element-wise")
def test_map_basic():
    result = numbers.map(lambda x: x * x).to.list()
    assert_that(result == [x * x for x in range(1, 11)], f"should square: {result}")


@test("map can change element type")
def test_map_change_type():
    result = letters.map(str.upper).map(len).to.list()
    assert_that(result == [1, 1, 1, 1, 1], f"should map to lengths: {result}")


@test("map extracts fields from generated records")
def test_map_records():
    ids = from_schema(person_schema, seed=7).take(5).map(lambda p: p['id']).to.list()
    assert_that(ids == [1, 2, 3, 4, 5], f"sequence ids should count up: {ids}")


# flat_map() tests

@test("flat_map flattens in outer-major order")
def test_flat_map_basic():
    result = nested.flat_map(lambda xs: xs).to.list()
    assert_that(result == [1, 2, 3, 4, 5, 6], f"should flatten: {result}")


@test("flat_map accepts streams as inner sequences")
def test_flat_map_streams():
    result = of(1, 2, 3).flat_map(lambda n: from_range(0, n)).to.list()
    assert_that(result == [0, 0, 1, 0, 1, 2], f"should expand ranges: {result}")


@test("flat_map over an empty upstream or empty inners is empty")
def test_flat_map_empty():
    assert_that(empty().flat_map(lambda x: [x, x]).to.list() == [], "empty upstream")
    assert_that(letters.flat_map(lambda x: []).to.list() == [], "empty inners")


@test("flat_map with an infinite inner is bounded by limit")
def test_flat_map_infinite_inner():
    result = of("a", "b").flat_map(lambda x: from_range(0)).limit(3).to.list()
    assert_that(result == [0, 1, 2], f"should stay inside the first inner: {result}")


# skip() tests

@test("skip drops the first n elements")
def test_skip_basic():
    assert_that(letters.skip(2).to.list() == ["c", "d", "e"], "should drop two")


@test("skip with zero or negative count is a no-op")
def test_skip_non_positive():
    assert_that(letters.skip(0).to.list() == letters.to.list(), "zero skip")
    assert_that(letters.skip(-3).to.list() == letters.to.list(), "negative skip")


@test("skip past the end yields nothing")
def test_skip_past_end():
    assert_that(letters.skip(10).to.list() == [], "should be empty")
    assert_that(letters.skip(5).to.list() == [], "exactly the length should be empty")


@test("skip then limit selects a window")
def test_skip_then_limit():
    result = letters.skip(1).limit(4).to.list()
    assert_that(result == ["b", "c", "d", "e"], f"window should be b..e: {result}")


@test("skip rejects non-integer counts")
def test_skip_rejects_float():
    assert_raises(TypeError, letters.skip, 1.5)
    assert_raises(TypeError, letters.skip, "2")
    assert_raises(TypeError, letters.skip, True)


# skip_while() tests

@test("skip_while drops the matching prefix only")
def test_skip_while_basic():
    result = of(1, 2, 5, 1, 2).skip_while(lambda x: x < 3).to.list()
    assert_that(result == [5, 1, 2], f"later small values must survive: {result}")


@test("skip_while stops consulting the predicate after the first failure")
def test_skip_while_predicate_calls():
    seen = []

    def pred(x):
        seen.append(x)
        return x < 3

    of(1, 2, 3, 4, 1).skip_while(pred).to.list()
    assert_that(seen == [1, 2, 3], f"predicate should see only the prefix and first failure: {seen}")


@test("skip_while that always holds yields nothing")
def test_skip_while_all():
    assert_that(letters.skip_while(lambda x: True).to.list() == [], "should be empty")


# limit() tests

@test("limit keeps at most n elements")
def test_limit_basic():
    assert_that(letters.limit(3).to.list() == ["a", "b", "c"], "should keep three")
    assert_that(letters.limit(10).to.list() == letters.to.list(), "larger limit keeps all")


@test("limit with zero or negative count is empty")
def test_limit_non_positive():
    assert_that(letters.limit(0).to.list() == [], "zero limit")
    assert_that(letters.limit(-1).to.list() == [], "negative limit")


@test("limit rejects non-integer counts")
def test_limit_rejects_none():
    assert_raises(TypeError, letters.limit, None)


# limit_while() tests

@test("limit_while stops at the first failure without yielding it")
def test_limit_while_basic():
    result = of(1, 2, 5, 1, 2).limit_while(lambda x: x < 3).to.list()
    assert_that(result == [1, 2], f"should stop at 5: {result}")


@test("limit_while that never holds is empty")
def test_limit_while_none():
    assert_that(letters.limit_while(lambda x: False).to.list() == [], "should be empty")


@test("limit_while on an infinite stream terminates")
def test_limit_while_infinite():
    result = from_range(0).limit_while(lambda x: x * x < 20).to.list()
    assert_that(result == [0, 1, 2, 3, 4], f"should stop once the square reaches 20: {result}")


# distinct() tests

@test("distinct keeps first occurrences")
def test_distinct_basic():
    result = of("a", "b", "a", "c").distinct().to.list()
    assert_that(result == ["a", "b", "c"], f"should drop the repeat: {result}")


@test("distinct with an always-true comparer keeps only the first element")
def test_distinct_always_equal():
    result = letters.distinct(lambda a, b: True).to.list()
    assert_that(result == ["a"], f"only the first should survive: {result}")


@test("distinct with an always-false comparer keeps everything")
def test_distinct_never_equal():
    result = of("a", "a", "a").distinct(lambda a, b: False).to.list()
    assert_that(result == ["a", "a", "a"], f"nothing should be dropped: {result}")


@test("distinct comparer receives candidate first, accepted second")
def test_distinct_argument_order():
    calls = []

    def eq(candidate, accepted):
        calls.append((candidate, accepted))
        return candidate == accepted

    of(1, 2, 1).distinct(eq).to.list()
    assert_that(calls == [(2, 1), (1, 1)], f"unexpected comparer calls: {calls}")


@test("distinct by a case-insensitive comparer")
def test_distinct_case_insensitive():
    result = of("Apple", "apple", "BANANA", "banana", "cherry") \
        .distinct(lambda a, b: a.lower() == b.lower()).to.list()
    assert_that(result == ["Apple", "BANANA", "cherry"], f"first spelling wins: {result}")


@test("distinct without comparer is strict about types")
def test_distinct_strict_types():
    result = of(1, 1.0, True, 1, "1").distinct().to.list()
    assert_that(len(result) == 4, f"1, 1.0, True and '1' are all different: {result}")


@test("distinct handles unhashable elements")
def test_distinct_unhashable():
    result = of([1], [2], [1], {'a': 1}, {'a': 1}).distinct().to.list()
    assert_that(result == [[1], [2], {'a': 1}], f"equal lists and dicts collapse: {result}")


@test("distinct state resets between enumerations")
def test_distinct_resets():
    s = of("x", "y", "x").distinct()
    assert_that(s.to.list() == ["x", "y"], "first pass")
    assert_that(s.to.list() == ["x", "y"], "second pass should not remember the first")


@test("distinct is lazy enough to bound an infinite stream")
def test_distinct_infinite():
    result = from_range(0).map(lambda x: x % 3).distinct().limit(3).to.list()
    assert_that(result == [0, 1, 2], f"should produce the three residues: {result}")


# sorted() tests

@test("sorted with a descending comparer")
def test_sorted_descending():
    result = letters.sorted(descending).to.list()
    assert_that(result == ["e", "d", "c", "b", "a"], f"should reverse: {result}")


@test("sorted on an empty stream is empty")
def test_sorted_empty():
    assert_that(empty().sorted(ascending).to.list() == [], "should be empty")


@test("sorted is stable for equal keys")
def test_sorted_stable():
    words = of("bb", "a", "cc", "d", "ee")
    by_length = lambda x, y: len(x) - len(y)
    result = words.sorted(by_length).to.list()
    assert_that(result == ["a", "d", "bb", "cc", "ee"], f"ties keep encounter order: {result}")


@test("sorted matches python's own cmp_to_key sort")
def test_sorted_matches_builtin():
    data = [5, 3, 9, 1, 5, 7, 2]
    result = of_iterable(data).sorted(ascending).to.list()
    assert_that(result == sorted(data, key=cmp_to_key(ascending)), f"should match: {result}")


@test("sorted records by age then keeps working downstream")
def test_sorted_records():
    people = from_schema(person_schema, seed=3).take(15)
    ages = people.sorted(lambda a, b: a['age'] - b['age']).map(lambda p: p['age']).to.list()
    assert_that(ages == sorted(ages), f"ages should be non-decreasing: {ages}")
    assert_that(len(ages) == 15, "nothing should be lost")


# peek() tests

@test("peek observes every element without changing it")
def test_peek_basic():
    seen = []
    result = letters.peek(seen.append).to.list()
    assert_that(result == letters.to.list(), "elements unchanged")
    assert_that(seen == result, f"action should see each element: {seen}")


@test("peek sees elements in pull order across operators")
def test_peek_order():
    events = []
    of(1, 2, 3) \
        .peek(lambda x: events.append(('before', x))) \
        .map(lambda x: x * 10) \
        .peek(lambda x: events.append(('after', x))) \
        .to.list()
    expected = [('before', 1), ('after', 10), ('before', 2), ('after', 20), ('before', 3), ('after', 30)]
    assert_that(events == expected, f"elements should flow one at a time: {events}")


# construction-time checks

@test("operators reject missing callbacks at construction")
def test_missing_callbacks():
    assert_raises(TypeError, letters.filter, None)
    assert_raises(TypeError, letters.map, None)
    assert_raises(TypeError, letters.flat_map, "not callable")
    assert_raises(TypeError, letters.skip_while, None)
    assert_raises(TypeError, letters.limit_while, 3)
    assert_raises(TypeError, letters.sorted, None)
    assert_raises(TypeError, letters.peek, None)
    assert_raises(TypeError, letters.distinct, "eq")


@test("repr names the node chain")
def test_repr_chain():
    chain = of(1).map(str).limit(1)
    assert_that(repr(chain) == "Limit(Map(IterableSource))", f"unexpected repr: {chain!r}")
    joined = repr(of(1).concat(of(2)))
    assert_that(joined == "Concat(IterableSource, IterableSource)", f"unexpected repr: {joined}")


if __name__ == "__main__":
    suite.run(title="qstream intermediate operators test suite")

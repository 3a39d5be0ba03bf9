import math
import suite
from dgen import from_schema, Generator
from linqy import Q, List

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data generation schemas ---

# schema for simple objects used in many tests
object_schema = {
    'id': {'_qen_provider': 'sequence', 'start': 1},
    'name': 'word',
    'value': ('pyfloat', {'min_value': 0, 'max_value': 1000}),
    'category': {'_qen_provider': 'choice', 'from': ['a', 'b', 'c']}
}

# schema for users and posts to test joins
users_schema = {
    'user_id': {'_qen_provider': 'sequence', 'start': 1},
    'name': 'name'
}

posts_schema = {
    'post_id': 'uuid4',
    'user_id': ('pyint', {'min_value': 1, 'max_value': 8}),  # includes users who don't exist
    'content': 'sentence'
}

objects = from_schema(object_schema, seed=11).take(300)
users = from_schema(users_schema, seed=12).take(5)
posts = from_schema(posts_schema, seed=13).take(60)


# --- generator ---

@test("generator is deterministic for a seed")
def test_generator_seeded():
    first = from_schema(object_schema, seed=3).take(5).to.list()
    second = from_schema(object_schema, seed=3).take(5).to.list()
    assert_that(first == second, "same seed, same records")
    assert_that(isinstance(objects, List) and objects.length == 300, "take returns a linqy List")


@test("generator resolves refs and literals")
def test_generator_providers():
    record = Generator(seed=1).create({
        'kind': {'_qen_provider': 'literal', 'value': 'pet'},
        'label': {'_qen_provider': 'ref', 'key': 'kind'},
    })
    assert_that(record == {'kind': 'pet', 'label': 'pet'}, "ref should copy an earlier field")
    assert_raises(ValueError, lambda: Generator().create({'x': {'_qen_provider': 'ref', 'key': 'nope'}}))


# --- pipelines against plain python ---

@test("where and select agree with a comprehension")
def test_where_select_generated():
    expected = [o['name'] for o in objects.to.list() if o['value'] > 500]
    actual = objects.where(lambda o: o['value'] > 500).select(lambda o: o['name']).to.list()
    assert_that(actual == expected, "filtered names should match")


@test("group_by totals agree with a manual tally")
def test_group_by_generated():
    tally = {}
    for o in objects:
        tally[o['category']] = tally.get(o['category'], 0) + o['value']

    grouped = objects.group.group_by(
        lambda o: o['category'],
        lambda o: o['value'],
        lambda key, values: (key, sum(values))
    ).to.list()

    assert_that([key for key, _ in grouped] == list(tally), "groups in first seen order")
    for key, total in grouped:
        assert_that(math.isclose(total, tally[key]), f"total for {key} should match")


@test("join only pairs posts with existing users")
def test_join_generated():
    user_ids = {u['user_id'] for u in users}
    expected = [(u['name'], p['post_id']) for u in users for p in posts if p['user_id'] == u['user_id']]
    joined = users.join.join(posts, lambda u: u['user_id'], lambda p: p['user_id'],
                             lambda u, p: (u['name'], p['post_id'])).to.list()

    assert_that(joined == expected, "outer order, then inner order")
    orphans = posts.where(lambda p: p['user_id'] not in user_ids).to.count()
    assert_that(len(joined) + orphans == posts.length, "every post is either joined or orphaned")


@test("stats agree with python builtins")
def test_stats_generated():
    values = [o['value'] for o in objects]
    assert_that(math.isclose(objects.stats.sum(lambda o: o['value']), sum(values)), "sum")
    assert_that(math.isclose(objects.stats.average(lambda o: o['value']), sum(values) / len(values)), "average")
    assert_that(objects.stats.max(lambda o: o['value']) == max(values), "max")


@test("ordering matches sorted")
def test_ordering_generated():
    expected = sorted(objects, key=lambda o: (o['category'], -o['value']))
    actual = objects.order_by(lambda o: o['category']).then_by_descending(lambda o: o['value']).to.list()
    assert_that(actual == expected, "category ascending, value descending")


if __name__ == "__main__":
    suite.run(title="linqy generated data test")

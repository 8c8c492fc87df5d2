from __future__ import annotations

import unittest

from utilbelt import (
    IterateeConfigError,
    IterateeKind,
    UtilbeltError,
    base_iteratee,
    cb,
    classify_iteratee,
    constant,
    get_iteratee,
    identity,
    is_default_iteratee,
    iteratee,
    map_,
    noop,
    optimize_cb,
    positional_capacity,
    reset_iteratee,
    set_iteratee,
    signature_cache_stats,
)


class Counter:
    def __init__(self) -> None:
        self.total = 0

    def add(self, value):
        self.total += value
        return self.total


class HelperTests(unittest.TestCase):
    def test_identity_returns_same_object(self) -> None:
        stooge = {"name": "moe"}
        self.assertIs(identity(stooge), stooge)
        self.assertIs(identity(stooge, 0, [stooge]), stooge)

    def test_constant(self) -> None:
        stooge = {"name": "moe"}
        self.assertIs(constant(stooge)(), stooge)
        self.assertIs(constant(stooge)(1, 2, 3), stooge)

    def test_noop_returns_none(self) -> None:
        self.assertIsNone(noop())
        self.assertIsNone(noop(1, 2, key="value"))


class ClassifyIterateeTests(unittest.TestCase):
    def test_each_shorthand_maps_to_one_kind(self) -> None:
        cases = [
            (None, IterateeKind.IDENTITY),
            (len, IterateeKind.CALLABLE),
            (lambda value: value, IterateeKind.CALLABLE),
            ({"a": 1}, IterateeKind.MATCHER),
            ("name", IterateeKind.PROPERTY),
            (0, IterateeKind.PROPERTY),
            (["a", "b"], IterateeKind.PROPERTY),
            (("a", 1), IterateeKind.PROPERTY),
        ]
        for value, kind in cases:
            with self.subTest(value=value):
                self.assertIs(classify_iteratee(value).kind, kind)

    def test_base_iteratee_dispatch(self) -> None:
        self.assertIs(base_iteratee(None), identity)
        self.assertEqual(base_iteratee("name")({"name": "moe"}, 0, []), "moe")
        self.assertEqual(base_iteratee(["a", "b"])({"a": {"b": 3}}), 3)
        self.assertIs(base_iteratee({"a": 1})({"a": 1, "b": 2}, 0, []), True)
        self.assertIs(base_iteratee({"a": 1})({"a": 2}), False)


class PositionalCapacityTests(unittest.TestCase):
    def test_counts_positional_parameters(self) -> None:
        def two(a, b, *, c=None):
            return a

        def variadic(*args):
            return args

        self.assertEqual(positional_capacity(two), 2)
        self.assertIsNone(positional_capacity(variadic))
        self.assertEqual(positional_capacity(Counter().add), 1)
        self.assertEqual(positional_capacity(len), 1)

    def test_cache_stats(self) -> None:
        def three(a, b, c):
            return a

        signature_cache_stats(reset=True)
        positional_capacity(three)
        positional_capacity(three)
        stats = signature_cache_stats()
        self.assertGreaterEqual(stats["hits"], 1)
        self.assertGreaterEqual(stats["misses"], 1)
        self.assertGreaterEqual(stats["size"], 1)
        self.assertGreater(stats["max_size"], 0)


class OptimizeCbTests(unittest.TestCase):
    def test_fast_path_returns_function_unchanged(self) -> None:
        def full(value, index, collection):
            return value

        def variadic(*args):
            return args

        self.assertIs(optimize_cb(full), full)
        self.assertIs(optimize_cb(full, None, 1), full)
        self.assertIs(optimize_cb(variadic, None, None), variadic)

    def test_narrow_callables_drop_extra_arguments(self) -> None:
        double = optimize_cb(lambda value: value * 2)
        self.assertEqual(double(2, 0, [2]), 4)
        self.assertEqual(optimize_cb(len)([1, 2], 0, [[1, 2]]), 2)
        self.assertEqual(optimize_cb(lambda: "none", None, None)(1, 2, 3, 4), "none")

    def test_context_with_arity_one(self) -> None:
        scaled = optimize_cb(lambda self, value: value * self["multiplier"], {"multiplier": 5}, 1)
        self.assertEqual(scaled(2), 10)

    def test_context_with_arity_three(self) -> None:
        ctx = {"tag": "ctx"}
        spread = optimize_cb(lambda self, value, index, collection: (self["tag"], value, index, collection), ctx, 3)
        self.assertEqual(spread("v", 1, ["x", "v"]), ("ctx", "v", 1, ["x", "v"]))

    def test_context_with_arity_four(self) -> None:
        reducer = optimize_cb(lambda self, acc, value, index, collection: acc + value * self, 10, 4)
        self.assertEqual(reducer(1, 2, 0, [2]), 21)

    def test_context_with_unbounded_arity_passes_everything(self) -> None:
        collect = optimize_cb(lambda *args: args, "ctx", None)
        self.assertEqual(collect(1, 2, 3, 4, 5), ("ctx", 1, 2, 3, 4, 5))

    def test_context_is_trimmed_to_capacity(self) -> None:
        self.assertEqual(optimize_cb(lambda self: self, "ctx")(1, 2, 3), "ctx")
        self.assertEqual(optimize_cb(lambda: 7, "ctx")(1, 2, 3), 7)

    def test_bound_method_receives_value(self) -> None:
        counter = Counter()
        add = optimize_cb(counter.add)
        add(3, 0, [3])
        add(4, 1, [3, 4])
        self.assertEqual(counter.total, 7)

    def test_callback_exceptions_propagate(self) -> None:
        def boom(value):
            raise KeyError(value)

        with self.assertRaises(KeyError):
            optimize_cb(boom)(1, 0, [1])


class IterateeFactoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.addCleanup(reset_iteratee)

    def test_default_factory(self) -> None:
        self.assertTrue(is_default_iteratee())
        self.assertIs(get_iteratee(), iteratee)
        self.assertEqual(iteratee(lambda value: value + 1)(1, 0, [1]), 2)
        self.assertEqual(iteratee("a")({"a": 5}), 5)

    def test_cb_uses_base_translation_by_default(self) -> None:
        self.assertIs(cb(None), identity)
        self.assertEqual(cb("name")({"name": "curly"}, 0, []), "curly")

    def test_global_override_and_restore(self) -> None:
        def tagging_factory(value, context):
            return lambda element: ("custom", element)

        set_iteratee(tagging_factory)
        self.assertFalse(is_default_iteratee())
        self.assertIs(get_iteratee(), tagging_factory)
        self.assertEqual(map_([1, 2], None), [("custom", 1), ("custom", 2)])

        reset_iteratee()
        self.assertTrue(is_default_iteratee())
        self.assertEqual(map_([1, 2], None), [1, 2])

    def test_explicit_factory_wins_over_global(self) -> None:
        set_iteratee(lambda value, context: lambda element: "global")
        callback = cb(None, factory=lambda value, context: lambda element: "explicit")
        self.assertEqual(callback(1, 0, [1]), "explicit")
        self.assertEqual(cb(None)(1, 0, [1]), "global")

    def test_factory_receives_value_and_context(self) -> None:
        seen = []

        def recording_factory(value, context):
            seen.append((value, context))
            return identity

        cb("name", "ctx", factory=recording_factory)
        self.assertEqual(seen, [("name", "ctx")])

    def test_rejects_non_callable_factory(self) -> None:
        with self.assertRaises(IterateeConfigError) as caught:
            set_iteratee(5)
        self.assertIsInstance(caught.exception, TypeError)
        self.assertIsInstance(caught.exception, UtilbeltError)
        self.assertEqual(caught.exception.factory, 5)
        self.assertTrue(is_default_iteratee())

    def test_override_is_logged(self) -> None:
        with self.assertLogs("utilbelt.callbacks", level="DEBUG") as logs:
            set_iteratee(lambda value, context: identity)
            reset_iteratee()
        self.assertEqual(len(logs.records), 2)


if __name__ == "__main__":
    unittest.main()

"""
Тесты сверки модулей с покрытием.

Проверяют:
- Регистрацию каждого модуля в результате (даже без пересечений)
- Полуоткрытую семантику интервалов на стыках
- Все шесть случаев взаимного расположения и сдвиг указателей
- Необязательную нормализацию входа
"""

import pytest

from bcov.coverage import (
    CoverageRange,
    ModuleInterval,
    Overlap,
    classify,
    normalize_modules,
    normalize_ranges,
    reconcile,
    unused_modules,
)


def M(name, start, end):
    return ModuleInterval(name=name, start=start, end=end)


def R(start, end):
    return CoverageRange(start=start, end=end)


# ==================== Классификация ====================

@pytest.mark.parametrize(
    "module, rng, expected",
    [
        (M("m", 0, 10), R(10, 20), Overlap.BEFORE),
        (M("m", 20, 30), R(10, 20), Overlap.AFTER),
        (M("m", 12, 18), R(10, 20), Overlap.INSIDE),
        (M("m", 5, 25), R(10, 20), Overlap.CONTAINS),
        (M("m", 5, 15), R(10, 20), Overlap.TAIL_IN),
        (M("m", 15, 25), R(10, 20), Overlap.HEAD_IN),
    ],
)
def test_classify_all_cases(module, rng, expected):
    assert classify(module, rng) is expected


def test_identical_intervals_count_as_inside():
    # первая подходящая проверка — INSIDE
    assert classify(M("m", 10, 20), R(10, 20)) is Overlap.INSIDE


# ==================== Регистрация модулей ====================

def test_empty_ranges_leave_all_unused():
    modules = [M("a", 0, 10), M("b", 10, 20)]
    verdicts = reconcile(modules, [])
    assert verdicts == {"a": False, "b": False}
    assert unused_modules(verdicts) == ["a", "b"]


def test_no_modules():
    assert reconcile([], [R(0, 10)]) == {}


def test_every_visited_module_registered_once():
    modules = [M("a", 0, 10), M("b", 10, 20), M("c", 20, 30), M("d", 30, 40)]
    verdicts = reconcile(modules, [R(100, 200)])
    assert list(verdicts) == ["a", "b", "c", "d"]
    assert all(used is False for used in verdicts.values())


def test_modules_after_last_range_are_unused():
    modules = [M("a", 0, 10), M("b", 50, 60), M("c", 60, 70)]
    verdicts = reconcile(modules, [R(0, 5)])
    assert verdicts == {"a": True, "b": False, "c": False}
    assert unused_modules(verdicts) == ["b", "c"]


def test_full_coverage_marks_everything_used():
    modules = [M("a", 0, 10), M("b", 10, 30), M("c", 30, 40)]
    verdicts = reconcile(modules, [R(0, 10**9)])
    assert verdicts == {"a": True, "b": True, "c": True}
    assert unused_modules(verdicts) == []


# ==================== Границы ====================

def test_touching_range_does_not_count():
    assert reconcile([M("m", 10, 20)], [R(20, 30)]) == {"m": False}


def test_one_unit_overlap_counts():
    assert reconcile([M("m", 10, 20)], [R(19, 30)]) == {"m": True}


def test_range_ending_at_module_start_does_not_count():
    verdicts = reconcile([M("m", 10, 20)], [R(0, 10)])
    assert verdicts == {"m": False}


# ==================== Вложенность ====================

def test_module_inside_range():
    assert reconcile([M("m", 5, 15)], [R(0, 20)]) == {"m": True}


def test_range_inside_module():
    assert reconcile([M("m", 5, 15)], [R(8, 12)]) == {"m": True}


def test_one_range_covers_several_modules():
    modules = [M("a", 0, 5), M("b", 5, 10), M("c", 10, 15)]
    verdicts = reconcile(modules, [R(2, 12)])
    assert verdicts == {"a": True, "b": True, "c": True}


def test_several_ranges_inside_one_module():
    modules = [M("a", 0, 100), M("b", 100, 110)]
    verdicts = reconcile(modules, [R(10, 20), R(30, 40), R(105, 106)])
    assert verdicts == {"a": True, "b": True}


def test_gaps_between_ranges():
    modules = [M("a", 0, 10), M("b", 10, 20), M("c", 20, 30), M("d", 30, 40)]
    verdicts = reconcile(modules, [R(2, 4), R(31, 33)])
    assert verdicts == {"a": True, "b": False, "c": False, "d": True}
    assert unused_modules(verdicts) == ["b", "c"]


def test_end_to_end_scenario():
    modules = [M("a", 0, 10), M("b", 10, 30), M("c", 30, 40)]
    verdicts = reconcile(modules, [R(5, 25)])
    assert verdicts == {"a": True, "b": True, "c": False}
    assert unused_modules(verdicts) == ["c"]


def test_empty_module_body_inside_range():
    verdicts = reconcile([M("empty", 12, 12)], [R(10, 20)])
    assert verdicts == {"empty": True}


def test_verdict_never_flips_back():
    # "a" помечается на первом диапазоне и остаётся True дальше
    modules = [M("a", 0, 50)]
    verdicts = reconcile(modules, [R(10, 20), R(60, 70)])
    assert verdicts == {"a": True}


def test_input_not_mutated():
    modules = (M("b", 10, 20), M("a", 0, 10))
    ranges = (R(0, 5),)
    reconcile(modules, ranges)
    assert modules == (M("b", 10, 20), M("a", 0, 10))


# ==================== Нормализация ====================

def test_normalize_ranges_merges_overlapping_only():
    ranges = [R(20, 30), R(0, 10), R(5, 12), R(10, 15), R(30, 31)]
    assert normalize_ranges(ranges) == [R(0, 15), R(20, 30), R(30, 31)]


def test_normalize_ranges_keeps_well_formed_input():
    ranges = [R(0, 10), R(10, 20), R(25, 30)]
    assert normalize_ranges(ranges) == ranges


def test_normalize_modules_sorts_stably():
    modules = [M("b", 10, 20), M("a", 0, 10), M("z", 10, 10)]
    assert [m.name for m in normalize_modules(modules)] == ["a", "b", "z"]


def test_normalized_unsorted_input_reconciles_correctly():
    modules = normalize_modules([M("c", 30, 40), M("a", 0, 10), M("b", 10, 30)])
    ranges = normalize_ranges([R(20, 25), R(5, 8)])
    assert reconcile(modules, ranges) == {"a": True, "b": True, "c": False}

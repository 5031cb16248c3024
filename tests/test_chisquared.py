import itertools
import random

import pytest

from recursia.chisquared import MAX_PROBABILITIES, NUM_SAMPLES, is_close


def cycling(n):
    it = itertools.cycle(range(n))
    return lambda: next(it)


def test_single_or_no_outcome_passes_without_running():
    calls = []

    def experiment():
        calls.append(1)
        return 0

    assert is_close([], experiment) is True
    assert is_close([1.0], experiment) is True
    assert calls == []


def test_exact_uniform_frequencies_pass():
    assert is_close([0.25] * 4, cycling(4)) is True


def test_seeded_uniform_experiment_passes():
    rng = random.Random(1234)
    assert is_close([1 / 6] * 6, lambda: rng.randrange(6)) is True


def test_heavily_biased_experiment_fails():
    rng = random.Random(99)
    assert is_close([0.5, 0.5], lambda: 0 if rng.random() < 0.7 else 1) is False


def test_constant_experiment_fails_uniform():
    assert is_close([0.5, 0.5], lambda: 0) is False


def test_impossible_event_that_never_happens_is_ignored():
    assert is_close([0.5, 0.5, 0.0], cycling(2)) is True


def test_impossible_event_that_happens_fails():
    assert is_close([0.5, 0.5, 0.0], cycling(3)) is False


def test_single_possible_outcome_fails_threshold():
    # With one degree of freedom fewer than outcomes, the threshold is negative.
    assert is_close([1.0, 0.0], lambda: 0) is False


def test_too_many_outcomes_raises():
    probs = [1 / (MAX_PROBABILITIES + 1)] * (MAX_PROBABILITIES + 1)
    with pytest.raises(ValueError, match="too large"):
        is_close(probs, lambda: 0)


def test_out_of_range_outcome_raises():
    with pytest.raises(ValueError, match="Illegal experiment outcome: 3"):
        is_close([0.5, 0.5], lambda: 3)


def test_negative_outcome_raises():
    with pytest.raises(ValueError, match="valid range is 0 to 1"):
        is_close([0.5, 0.5], lambda: -1)


def test_experiment_runs_sample_count_times():
    calls = []

    def experiment():
        calls.append(1)
        return len(calls) % 2

    assert is_close([0.5, 0.5], experiment) is True
    assert len(calls) == NUM_SAMPLES
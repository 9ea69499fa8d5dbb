import pytest

from passlens.evaluator import (
    Strength,
    analyze,
    calculate_combinations,
    calculate_entropy,
    calculate_score,
    count_characters,
    estimate_crack_time,
    has_sequence,
    is_common,
    strength_level,
)

CRACK_TIERS = ["Instantly", "seconds", "minutes", "hours", "days", "years", "centuries"]


def _tier(crack_time):
    if crack_time == "Instantly":
        return 0
    return CRACK_TIERS.index(crack_time.split()[-1])


def test_empty_password():
    result = analyze("")
    assert result.length == 0
    assert not (result.has_upper or result.has_lower or result.has_numbers or result.has_special)
    assert not result.has_sequence
    assert not result.is_common
    assert result.score == 0
    assert result.strength == Strength.WEAK
    assert result.entropy == 0
    assert result.combinations == "0"
    assert result.crack_time == "Instantly"
    assert result.character_counts.total == 0


def test_character_counts():
    counts = count_characters("aB3!xyZ:")
    assert counts.upper == 2
    assert counts.lower == 3
    assert counts.numbers == 1
    assert counts.special == 2  # '!' and ':'
    assert counts.total == 8


def test_counts_skip_characters_outside_classes():
    # space, tilde, backtick and non-ASCII characters belong to no class
    pw = "a b~`é٣"
    counts = count_characters(pw)
    assert counts.total == 2
    assert counts.total < len(pw)
    # Unicode digits are not 0-9
    assert counts.numbers == 0


def test_sequence_detection():
    assert has_sequence("abc")
    assert not has_sequence("ab")
    assert not has_sequence("acb")
    assert has_sequence("1234")
    assert not has_sequence("cba")
    assert not has_sequence("aBc")
    # code point based: '9', ':', ';' are consecutive
    assert has_sequence("9:;")
    assert has_sequence("xxXYZ")


def test_common_password_detection():
    assert is_common("PASSWORD")
    assert is_common("admin")
    assert not is_common("Password1!")
    assert not is_common("password ")


def test_strength_boundaries():
    expected = {
        0: Strength.WEAK, 24: Strength.WEAK,
        25: Strength.FAIR, 49: Strength.FAIR,
        50: Strength.GOOD, 74: Strength.GOOD,
        75: Strength.STRONG, 89: Strength.STRONG,
        90: Strength.VERY_STRONG, 100: Strength.VERY_STRONG,
    }
    for score, strength in expected.items():
        assert strength_level(score) == strength


def test_score_components():
    assert analyze("a").score == 12
    # 20 length + 40 classes + 10 variety bonus
    result = analyze("Password1!")
    assert result.score == 70
    assert result.strength == Strength.GOOD
    # 16 + 10 - 20 (common)
    assert analyze("password").score == 6
    # 6 + 10 - 15 (sequence)
    assert analyze("abc").score == 1


def test_score_is_clamped():
    # 8 + 10 - 15 - 20 would be negative
    assert analyze("1234").score == 0
    assert calculate_score(200, True, True, True, True) == 80
    assert calculate_score(0, False, False, False, False, has_sequence=True, is_common=True) == 0
    for pw in ("ABCDEFGHIJKLMNOPQRSTUVWXYZ" * 20, "abc" * 1000, "Xk9#" * 500):
        assert 0 <= analyze(pw).score <= 100


def test_entropy():
    assert calculate_entropy("") == 0
    assert calculate_entropy("abc") == 14      # 3 * log2(26) = 14.1
    assert calculate_entropy("aB3!") == 26     # 4 * log2(94) = 26.2
    # anything outside [A-Za-z0-9] widens the pool by 32
    assert calculate_entropy("é") == 5


def test_combinations():
    assert calculate_combinations(1, False, True, False, False) == "2.60e+1"
    assert calculate_combinations(3, False, True, False, False) == "1.76e+4"
    assert calculate_combinations(4, True, True, True, True) == "7.81e+7"
    assert calculate_combinations(0, True, True, True, True) == "0"
    assert calculate_combinations(5, False, False, False, False) == "0"


def test_combinations_ignore_unclassified_characters():
    # entropy sees a 32-symbol pool, the keyspace figure does not
    result = analyze("é")
    assert result.entropy == 5
    assert result.combinations == "0"


def test_crack_time_table():
    assert estimate_crack_time(0) == "Instantly"
    assert estimate_crack_time(4) == "Instantly"
    assert estimate_crack_time(5) == "8 seconds"
    assert estimate_crack_time(6) == "12 minutes"
    assert estimate_crack_time(7) == "19 hours"
    assert estimate_crack_time(8) == "77 days"
    assert estimate_crack_time(9) == "20 years"
    assert estimate_crack_time(10) == "19 centuries"


def test_crack_time_uses_fixed_pool():
    # all-digit and mixed passwords of the same length share one estimate,
    # even though their keyspace figures differ
    digits = analyze("90817263")
    mixed = analyze("Xk9#mQ2$")
    assert digits.crack_time == mixed.crack_time == "77 days"
    assert digits.combinations != mixed.combinations


def test_crack_time_monotonic_in_length():
    tiers = [_tier(estimate_crack_time(n)) for n in range(0, 400)]
    assert tiers == sorted(tiers)


def test_huge_values_use_exponential_notation():
    assert estimate_crack_time(40).endswith("centuries")
    assert "e+" in estimate_crack_time(40)
    result = analyze("A" * 100000)
    assert result.crack_time.endswith("centuries")
    assert result.combinations == "2.16e+141497"
    assert result.score == 40


def test_analyze_is_pure():
    assert analyze("Tr0ub4dor&3") == analyze("Tr0ub4dor&3")


def test_to_dict_keys():
    d = analyze("Ab1!").to_dict()
    assert d["strength"] == "good"
    assert d["score"] == 58
    assert d["characterCounts"] == {"upper": 1, "lower": 1, "numbers": 1, "special": 1}
    assert set(d) == {
        "length", "hasUpper", "hasLower", "hasNumbers", "hasSpecial",
        "characterCounts", "hasSequence", "isCommon", "score", "strength",
        "entropy", "combinations", "crackTime",
    }


def test_character_counts_are_immutable_named_fields():
    counts = analyze("AAb1!").character_counts
    assert counts._asdict() == {"upper": 2, "lower": 1, "numbers": 1, "special": 1}
    assert (counts.upper, counts.lower, counts.numbers, counts.special) == (2, 1, 1, 1)
    with pytest.raises(AttributeError):
        counts.upper = 5


def test_crack_time_switches_to_exponential_at_1e21_centuries():
    # 95**19 / 1e9 s is about 1.2e19 centuries: still a plain integer
    count, unit = estimate_crack_time(19).split()
    assert unit == "centuries"
    assert count.isdigit()
    assert len(count) == 20
    # 95**20 / 1e9 s is about 1.137e21 centuries
    assert estimate_crack_time(20) == "1.14e+21 centuries"

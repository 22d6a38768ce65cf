import pytest

from breadboard.catalogue.moq import ACCEPTED, MOQPolicy, MOQReason, MOQRule, get_policy, set_policy


def _smallest_valid_at_least(quantity, minimum, increment):
    candidate = max(quantity, minimum)
    while (candidate - minimum) % increment != 0:
        candidate += 1
    return candidate


class TestMOQRule:
    def test_defaults_are_ones(self):
        assert MOQRule() == MOQRule(min_order_qty=1, increment=1, default_qty=1)

    @pytest.mark.parametrize("kwargs", [{"min_order_qty": 0}, {"increment": 0}])
    def test_rejects_non_positive_values(self, kwargs):
        with pytest.raises(ValueError):
            MOQRule(**kwargs)

    def test_next_valid(self):
        rule = MOQRule(min_order_qty=6, increment=6)

        assert rule.next_valid(1) == 6
        assert rule.next_valid(6) == 6
        assert rule.next_valid(7) == 12
        assert rule.next_valid(12) == 12
        assert rule.next_valid(13) == 18


class TestMOQPolicy:
    def test_unconfigured_sku_orders_in_ones(self):
        policy = MOQPolicy({})

        assert policy.resolve("UNKNOWN") == MOQRule()
        assert policy.validate("UNKNOWN", 1) == ACCEPTED
        assert policy.validate("UNKNOWN", 7) == ACCEPTED

    def test_missing_fields_default_to_one(self):
        policy = MOQPolicy({"SKU": {"min_order_qty": 4}})

        assert policy.resolve("SKU") == MOQRule(min_order_qty=4, increment=1, default_qty=1)

    def test_below_minimum(self):
        check = MOQPolicy({"X": {"min_order_qty": 6, "increment": 6}}).validate("X", 4)

        assert not check.ok
        assert check.reason is MOQReason.BELOW_MINIMUM
        assert check.reason.value == "below minimum"
        assert check.suggested == 6

    def test_invalid_increment(self):
        check = MOQPolicy({"X": {"min_order_qty": 6, "increment": 6}}).validate("X", 8)

        assert not check.ok
        assert check.reason is MOQReason.INVALID_INCREMENT
        assert check.reason.value == "invalid increment"
        assert check.suggested == 12

    def test_minimum_counts_from_min_not_zero(self):
        policy = MOQPolicy({"X": {"min_order_qty": 5, "increment": 3}})

        assert policy.validate("X", 5).ok
        assert policy.validate("X", 8).ok
        assert not policy.validate("X", 6).ok
        assert policy.validate("X", 6).suggested == 8

    @pytest.mark.parametrize("minimum", [1, 2, 3, 6])
    @pytest.mark.parametrize("increment", [1, 2, 5, 6])
    def test_acceptance_and_suggestion_for_all_small_quantities(self, minimum, increment):
        policy = MOQPolicy({"X": {"min_order_qty": minimum, "increment": increment}})

        for quantity in range(0, 40):
            check = policy.validate("X", quantity)
            expected_ok = quantity >= minimum and (quantity - minimum) % increment == 0

            assert check.ok is expected_ok
            if not expected_ok:
                assert check.suggested == _smallest_valid_at_least(quantity, minimum, increment)

    def test_normalize_is_advisory(self):
        policy = MOQPolicy({"X": {"min_order_qty": 6, "increment": 6}})

        assert policy.normalize("X", 12) == 12
        assert policy.normalize("X", 8) == 12
        assert policy.normalize("X", 1) == 6

    def test_rule_checks_are_independent(self):
        policy = MOQPolicy({"X": {"min_order_qty": 6, "increment": 6}})

        assert not policy.meets_minimum("X", 3)
        assert not policy.on_increment("X", 3)
        assert policy.meets_minimum("X", 8)
        assert not policy.on_increment("X", 8)


class TestPolicyRegistry:
    def test_default_policy_uses_seeded_configuration(self):
        rule = get_policy().resolve("BRD-SOUR-001")

        assert rule == MOQRule(min_order_qty=6, increment=6, default_qty=6)

    def test_set_policy(self):
        policy = MOQPolicy({"BRD-SOUR-001": {"min_order_qty": 2}})
        set_policy(policy)

        assert get_policy().resolve("BRD-SOUR-001").min_order_qty == 2

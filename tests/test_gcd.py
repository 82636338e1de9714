from addressbook.services.arithmetic import gcd, gcd_array


def test_gcd_array_empty_returns_none():
    assert gcd_array([]) is None


def test_gcd_array_single_value():
    assert gcd_array([6]) == 6


def test_gcd_array_multiple_values():
    assert gcd_array([4, 64, 32, 120]) == 4
    assert gcd_array((12, 18, 30)) == 6


def test_gcd():
    assert gcd(11, 22) == 11
    assert gcd(22, 11) == 11
    assert gcd(17, 5) == 1


def test_gcd_with_zero():
    assert gcd(0, 9) == 9
    assert gcd(9, 0) == 9
    assert gcd(0, 0) == 0


def test_gcd_keeps_sign_from_operand_ordering():
    # remainders follow the sign of the dividend, the result is not normalised
    assert gcd(-4, 6) == 2
    assert gcd(-4, -6) == -2
    assert gcd_array([-4, -6]) == -2

"""Tests for arbitrary-precision arithmetic helpers.

このファイルは因数分解探索の土台となる算術プリミティブをテストします。

1. random_odd_positive: 暗号論的乱数による正の奇数の生成
2. isqrt: ニュートン法による整数平方根
3. is_prime: 試し割りによる素数判定
4. mod_pow / big_pow: 指数をチャンク分割するべき乗
"""

import numpy as np
import pytest

from shor_toolkit.utils import (
    EXPONENT_CHUNK_BITS,
    big_pow,
    byte_count,
    gcd,
    is_prime,
    isqrt,
    mod_pow,
    random_base,
    random_odd_positive,
)


def _sieve(limit: int) -> np.ndarray:
    """エラトステネスの篩（参照実装）."""
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(limit ** 0.5) + 1):
        if flags[p]:
            flags[p * p :: p] = False
    return flags


class TestRandomOddPositive:
    """乱数生成のテスト.

    下位ビットを 1 に、最上位ビットを 0 に固定するので、
    生成される値は必ず正の奇数で、指定バイト数に収まります。
    """

    @pytest.mark.parametrize("length", [1, 2, 8, 32])
    def test_odd_positive_and_bounded(self, length):
        """多数のサンプルで奇数・正・範囲内であることを確認."""
        for _ in range(500):
            value = random_odd_positive(length)
            assert value > 0
            assert value % 2 == 1
            assert value < 2 ** (8 * length - 1)

    def test_default_length(self):
        value = random_odd_positive()
        assert 0 < value < 2 ** 63

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length(self, length):
        """バイト数が 0 以下なら ValueError."""
        with pytest.raises(ValueError):
            random_odd_positive(length)

    def test_random_base_above_one(self):
        """random_base は 1 を返さない（brute_log が停止しなくなるため）."""
        for _ in range(500):
            a = random_base(15)
            assert a > 1
            assert a % 2 == 1


class TestByteCount:
    """符号付きバイト長の計算."""

    def test_values(self):
        assert byte_count(0) == 1
        assert byte_count(15) == 1
        assert byte_count(127) == 1
        assert byte_count(128) == 2  # 符号ビットのぶん 1 バイト増える
        assert byte_count(2 ** 64) == 9


class TestIsqrt:
    """整数平方根のテスト.

    isqrt(n)^2 <= n < (isqrt(n)+1)^2 を満たすことを検証します。
    """

    def test_small_range(self):
        for n in range(0, 20000):
            r = isqrt(n)
            assert r * r <= n < (r + 1) * (r + 1)

    def test_zero(self):
        assert isqrt(0) == 0

    def test_large_values(self):
        """大きな整数（2^200 前後）でも収束する."""
        for n in [2 ** 200, 2 ** 200 - 1, 2 ** 200 + 1, 10 ** 60 + 12345, (2 ** 127 - 1) ** 2]:
            r = isqrt(n)
            assert r * r <= n < (r + 1) * (r + 1)

    def test_negative(self):
        with pytest.raises(ValueError):
            isqrt(-1)


class TestIsPrime:
    """素数判定のテスト.

    0〜10000 の範囲で篩の結果と完全に一致することを確認します。
    """

    def test_matches_sieve(self):
        flags = _sieve(10000)
        for n in range(0, 10001):
            assert is_prime(n) == bool(flags[n]), n

    def test_edge_cases(self):
        assert not is_prime(-7)
        assert not is_prime(0)
        assert not is_prime(1)
        assert is_prime(2)
        assert not is_prime(4)

    def test_larger_values(self):
        assert is_prime(1_000_003)
        assert not is_prime(1_000_001)  # 101 × 9901
        assert not is_prime(999_983 * 999_979)


class TestModPow:
    """モジュラーべき乗のテスト."""

    def test_matches_big_pow(self):
        """小さい指数では big_pow(a, b) % n と一致する."""
        for a in range(0, 20):
            for b in range(0, 30):
                for n in [1, 2, 7, 15, 21, 97, 1000]:
                    assert mod_pow(a, b, n) == big_pow(a, b) % n

    def test_exponent_wider_than_chunk(self):
        """チャンク幅を超える指数でも組み込み pow と一致する."""
        b = (1 << (3 * EXPONENT_CHUNK_BITS)) + 12345
        assert mod_pow(7, b, 1_000_003) == pow(7, b, 1_000_003)
        huge = 2 ** 521 - 1
        assert mod_pow(3, huge, 2 ** 89 - 1) == pow(3, huge, 2 ** 89 - 1)

    def test_modulus_one(self):
        assert mod_pow(5, 0, 1) == 0
        assert mod_pow(5, 3, 1) == 0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            mod_pow(2, -1, 7)
        with pytest.raises(ValueError):
            mod_pow(2, 3, 0)


class TestBigPow:
    """剰余なしのべき乗."""

    def test_small(self):
        assert big_pow(3, 0) == 1
        assert big_pow(3, 4) == 81
        assert big_pow(-2, 3) == -8
        assert big_pow(0, 0) == 1
        assert big_pow(10, 50) == 10 ** 50

    def test_chunk_boundary(self):
        """指数がちょうどチャンク幅の場合（1 の冪なら巨大にならない）."""
        b = (1 << EXPONENT_CHUNK_BITS) + 3
        assert big_pow(1, b) == 1
        assert big_pow(-1, b) == -1

    def test_negative_exponent(self):
        with pytest.raises(ValueError):
            big_pow(2, -1)


class TestGCD:
    """GCD は負の値でも非負を返す（t2 = y - 1 が -1 になる場合など）."""

    def test_values(self):
        assert gcd(15, 5) == 5
        assert gcd(-1, 15) == 1
        assert gcd(0, 15) == 15
        assert gcd(-20, 21) == 1

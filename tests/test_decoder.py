from __future__ import annotations

import random
import string

from multicrypto.decoder import identity_decoder_key, is_permutation, random_decoder_key


def test_identity_key_is_the_alphabet():
    assert identity_decoder_key() == "abcdefghijklmnopqrstuvwxyz"
    assert identity_decoder_key() == identity_decoder_key()


def test_random_key_is_a_permutation_of_letters():
    key = random_decoder_key()
    assert len(key) == 26
    assert set(key) <= set(string.ascii_lowercase)
    assert is_permutation(key)


def test_random_keys_differ_between_calls():
    assert random_decoder_key() != random_decoder_key()


def test_seeded_random_key_is_reproducible():
    assert random_decoder_key(random.Random(42)) == random_decoder_key(random.Random(42))


def test_zero_swaps_keeps_identity():
    assert random_decoder_key(random.Random(1), swaps=0) == identity_decoder_key()


def test_is_permutation_rejects_duplicates_and_wrong_length():
    assert is_permutation(identity_decoder_key()[::-1])
    assert not is_permutation("a" * 26)
    assert not is_permutation("abc")
    assert not is_permutation(identity_decoder_key().upper())

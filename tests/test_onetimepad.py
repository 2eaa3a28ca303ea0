from bunnyhq.onetimepad import KeyGen, main


def test_class_init():
    assert KeyGen("abc").salt == bytes([97, 98, 99])


def test_hashing_with_salt():
    keygen = KeyGen("abc")
    assert "cc38887a5" in keygen.stream(18)
    assert "eee" in keygen.stream(39)
    assert "eeeee" in keygen.stream(816)
    assert "999" in keygen.stream(92)
    assert "99999" in keygen.stream(200)


def test_stream_is_hex_digest_length():
    assert len(KeyGen("abc").stream(0)) == 32


def test_extracting_multiples():
    keygen = KeyGen("abc")
    assert keygen.find_multiples([0, 0, 0, 2, 5, 45, 2, 2, 4]) == ([0], [])
    assert keygen.find_multiples([9, 4, 2, 7, 8, 8, 8, 8, 8, 8, 4, 67, 24, 65]) == ([8], [8])
    assert keygen.find_multiples([5, 32, 65, 34, 5, 68, 0, 9, 9, 8, 9, 9]) == ([], [])


def test_find_multiples_only_first_triple():
    assert KeyGen("abc").find_multiples("aaacccbbbbb") == (["a"], ["b"])


def test_key_generation_exp1():
    results = KeyGen("abc").generate(64)
    assert len(results) == 64
    assert results[0] == 39
    assert results[1] == 92
    assert results[63] == 22728
    assert 18 not in results


def test_key_generation_exp2():
    assert KeyGen("zpqevtbw").generate(64)[63] == 16106


def test_generate_zero_keys():
    assert KeyGen("abc").generate(0) == []


def test_main_prints_last_key(capsys):
    main(["abc", "--keys", "2"])
    assert capsys.readouterr().out == "Part 1 = 92\n"
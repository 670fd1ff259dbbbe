import io
import threading

import pytest

from passgen.charsets import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from passgen.errors import ConfigError, EntropyError, InvalidLengthError, NoCategoriesError
from passgen.generator import GenerationRequest, Generator, generate, must_generate

# fixed stream standing in for real randomness; golden values below depend on it
RANDOM_STRING = b"zUJfcYXQhe7luxOhEeJPZ8LIkKBzsnSqWALSpD78BbbgLtn6Da"


def _request(length=16, upper=False, lower=False, digits=False, symbols=False):
    return GenerationRequest(
        length=length,
        include_uppercase=upper,
        include_lowercase=lower,
        include_digits=digits,
        include_symbols=symbols,
    )


def _fixed_generator():
    return Generator.from_reader(io.BytesIO(RANDOM_STRING))


class CountingSource:
    def __init__(self):
        self.calls = 0

    def randbelow(self, n):
        self.calls += 1
        return 0


@pytest.mark.parametrize(
    "request_, expected",
    [
        (_request(upper=True), "VKGDZYRIFXMVYPIF"),
        (_request(lower=True), "vkgdzyrifxmvypif"),
        (_request(digits=True), "5639818575885508"),
        (_request(symbols=True), r"""_@+'$^]<)&\-@]:)"""),
        (_request(length=4, digits=True, symbols=True), "56^1"),
    ],
    ids=["uppercase", "lowercase", "digits", "symbols", "digits-and-symbols"],
)
def test_golden_output(request_, expected):
    assert _fixed_generator().generate(request_) == expected


def test_same_stream_same_password():
    req = _request(length=12, upper=True, lower=True, digits=True, symbols=True)
    assert _fixed_generator().generate(req) == _fixed_generator().generate(req)


def test_length_and_classes():
    req = GenerationRequest.all_classes(64)
    pw = generate(req)
    assert len(pw) == 64
    allowed = set(UPPERCASE.characters + LOWERCASE.characters + DIGITS.characters + SYMBOLS.characters)
    assert set(pw) <= allowed


def test_excluded_classes_never_appear():
    gen = Generator()
    for _ in range(50):
        pw = gen.generate(_request(length=20, lower=True, digits=True))
        assert len(pw) == 20
        assert not any(c in UPPERCASE or c in SYMBOLS for c in pw)
        assert all(c in LOWERCASE or c in DIGITS for c in pw)


@pytest.mark.parametrize("length", [0, -1, -100])
def test_non_positive_length_rejected(length):
    with pytest.raises(InvalidLengthError):
        Generator().generate(GenerationRequest.all_classes(length))
    # length is checked first, even with nothing enabled
    with pytest.raises(InvalidLengthError):
        Generator().generate(_request(length=length))


@pytest.mark.parametrize("length", [1, 16, 1000])
def test_no_categories_rejected(length):
    with pytest.raises(NoCategoriesError):
        Generator().generate(_request(length=length))


def test_invalid_length_draws_nothing():
    source = CountingSource()
    try:
        Generator(source).generate(_request(length=0, upper=True))
        raised = False
    except InvalidLengthError:
        raised = True
    assert raised
    assert source.calls == 0


def test_no_categories_draws_nothing():
    source = CountingSource()
    with pytest.raises(NoCategoriesError):
        Generator(source).generate(_request(length=8))
    assert source.calls == 0


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        generate(_request(length=0))
    with pytest.raises(ValueError):
        generate(_request(length=5))


def test_class_balanced_distribution():
    # 10 digits vs 31 symbols: a flat pool would give ~24% digits
    pw = Generator().generate(_request(length=20000, digits=True, symbols=True))
    digit_share = sum(c in DIGITS for c in pw) / len(pw)
    assert 0.45 < digit_share < 0.55


def test_exhausted_stream_raises_entropy_error():
    gen = Generator.from_reader(io.BytesIO(b"abc"))
    with pytest.raises(EntropyError):
        gen.generate(_request(length=16, upper=True))


def test_source_failure_is_wrapped():
    class Broken:
        def randbelow(self, n):
            raise OSError("device gone")

    with pytest.raises(EntropyError) as excinfo:
        Generator(Broken()).generate(_request(upper=True))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_bad_source_is_config_error():
    with pytest.raises(ConfigError):
        Generator(object())
    with pytest.raises(ConfigError):
        Generator.from_reader(None)
    with pytest.raises(ConfigError):
        Generator.from_reader("not a stream")


def test_generator_is_reusable_across_threads():
    gen = Generator()
    results = []

    def worker():
        results.append(gen.generate(_request(length=32, upper=True, digits=True)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(len(pw) == 32 for pw in results)


def test_must_generate():
    assert len(must_generate(_request(length=10, symbols=True))) == 10
    with pytest.raises(SystemExit) as excinfo:
        must_generate(_request(length=10))
    assert "no character categories selected" in str(excinfo.value)


def test_enabled_classes_order():
    req = _request(symbols=True, upper=True, digits=True)
    assert req.enabled_classes() == (UPPERCASE, DIGITS, SYMBOLS)


def test_text_stream_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        Generator.from_reader(io.StringIO(RANDOM_STRING.decode("ascii")))
    path = tmp_path / "stream.txt"
    path.write_bytes(RANDOM_STRING)
    with open(path, "r", encoding="ascii") as f:
        with pytest.raises(ConfigError):
            Generator.from_reader(f)
    with open(path, "rb") as f:
        assert Generator.from_reader(f).generate(_request(upper=True)) == "VKGDZYRIFXMVYPIF"


def test_reader_yielding_str_is_config_error():
    class StrReader:
        def read(self, n=-1):
            return "x" * n

    with pytest.raises(ConfigError):
        Generator.from_reader(StrReader())


def test_closed_stream_is_config_error():
    stream = io.BytesIO(RANDOM_STRING)
    stream.close()
    with pytest.raises(ConfigError):
        Generator.from_reader(stream)


def test_from_reader_consumes_nothing_up_front():
    stream = io.BytesIO(RANDOM_STRING)
    Generator.from_reader(stream)
    assert stream.tell() == 0

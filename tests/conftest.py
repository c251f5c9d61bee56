import random

import pytest

from detector_ia.services.oracles import OracleError
from detector_ia.utils.lexicon import default_lexicon


# Three declarative sentences of 8, 9 and 8 words; no connectors or stock phrases
PLAIN_TEXT = (
    "El perro marrón corre por el parque grande. "
    "La niña lee un libro nuevo en la tarde. "
    "Mi padre cocina arroz con pollo los domingos."
)


class FakePerplexityOracle:
    """
    Returns a fixed value, or one value per call when ``values`` is given, or
    raises. Records every sentence it saw.
    """

    def __init__(self, value=10.0, fail=False, values=None):
        self.value = value
        self.values = values
        self.fail = fail
        self.calls = []

    def score(self, sentence):
        self.calls.append(sentence)
        if self.fail:
            raise OracleError("service unavailable")
        if self.values is not None:
            return self.values[len(self.calls) - 1]
        return self.value


class FakeParaphraseOracle:
    def __init__(self, output="Texto reescrito completamente por el modelo.", fail=False):
        self.output = output
        self.fail = fail
        self.calls = []

    def generate(self, prompt, level, variant):
        self.calls.append((prompt, level, variant))
        if self.fail:
            raise OracleError("timeout")
        return self.output


class FixedRandom(random.Random):
    """random() always returns the same value; randrange() and choice() still draw from the seeded generator."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def lexicon():
    return default_lexicon()


@pytest.fixture
def plain_text():
    return PLAIN_TEXT


@pytest.fixture
def no_sleep():
    calls = []
    return calls, calls.append

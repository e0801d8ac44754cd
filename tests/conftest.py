import asyncio
import pytest

from ton_core import mnemonic_new

from walletlink.wallet import TonWallet


@pytest.fixture(scope="session")
def mnemonic():
    return mnemonic_new()


@pytest.fixture(scope="session")
def seed_phrase(mnemonic):
    return " ".join(mnemonic)


@pytest.fixture
def no_sleep(monkeypatch):
    calls = []
    original_sleep = asyncio.sleep

    async def fake_sleep(delay, *args, **kwargs):
        calls.append(delay)
        await original_sleep(0)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return calls


class FakeResponse:
    def __init__(self, data=None, status_code: int = 200, text: str = None):
        self.data = data
        self.status_code = status_code
        self.text = text if text is not None else str(data)

    def json(self):
        if self.data is None:
            raise ValueError("no json")
        return self.data


@pytest.fixture
def fake_response():
    return FakeResponse


def make_fake_wallet(address: str = "UQfake", mnemonic: list | None = None):
    return TonWallet(
        address=address,
        mnemonic=mnemonic if mnemonic is not None else ["word"] * 24,
        version="v4",
        raw_address="0:" + "00" * 32,
        public_key=b"\x01" * 32,
        private_key="02" * 64,
        state_init="te6cc",
    )


@pytest.fixture
def fake_wallet():
    return make_fake_wallet

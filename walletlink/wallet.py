from ton_core import (
    Address,
    CONTRACT_CODES,
    ContractVersion,
    NetworkGlobalID,
    PublicKey,
    StateInit,
    WalletV3Data,
    WalletV4Data,
    WalletV5Data,
    WalletV5SubwalletID,
    WorkchainID,
    mnemonic_to_wallet_key,
    to_cell,
)
from dataclasses import dataclass, field
from base64 import b64encode
from hashlib import sha256
from nacl.signing import SigningKey
from loguru import logger

from walletlink.retry import WalletError
import walletlink.config as config


WALLET_CONTRACTS = {
    "v3r2": ContractVersion.WalletV3R2,
    "v4": ContractVersion.WalletV4R2,
    "v5": ContractVersion.WalletV5R1,
}


def _wallet_data(version: str, public_key: bytes):
    public_key = PublicKey(public_key)
    if version == "v5":
        # v5r1 packs network, workchain and subwallet number into its own 32-bit id
        subwallet_id = WalletV5SubwalletID(workchain=WorkchainID(config.WORKCHAIN), network=NetworkGlobalID.MAINNET)
        return WalletV5Data(public_key=public_key, subwallet_id=subwallet_id)
    if version == "v4":
        return WalletV4Data(public_key=public_key, subwallet_id=config.DEFAULT_WALLET_ID)
    return WalletV3Data(public_key=public_key, subwallet_id=config.DEFAULT_WALLET_ID)


def _create_wallet(mnemonic: list, version: str):
    if version is None or version.lower() not in WALLET_CONTRACTS:
        raise WalletError("Unsupported wallet version")
    version = version.lower()

    public_key, private_key = mnemonic_to_wallet_key([word.lower() for word in mnemonic])
    state_init = StateInit(
        code=to_cell(CONTRACT_CODES[WALLET_CONTRACTS[version]]),
        data=_wallet_data(version, public_key).serialize(),
    )
    address = Address((config.WORKCHAIN, state_init.serialize().hash))
    return public_key, private_key, address, state_init


def _derive_wallet(mnemonic: list, version: str):
    try:
        return _create_wallet(mnemonic, version)
    except Exception as err:
        logger.debug(f'[•] Wallet | Detailed error: {err!r}')
        raise WalletError(f"Error generating wallet address: {err}")


def get_wallet_address(mnemonic: list, version: str) -> str:
    _, _, address, _ = _derive_wallet(mnemonic, version)
    return address.to_str(is_user_friendly=True, is_url_safe=True, is_bounceable=False)


def process_wallet_data(mnemonic: str, version: str):
    """Derive the wallet for a 24-word seed phrase.

    Returns a TonWallet with the url-safe non-bounceable address and the
    hex-encoded 64-byte secret key.
    """
    try:
        mnemonic_list = mnemonic.strip().split()
        if len(mnemonic_list) != 24:
            raise WalletError("Invalid seed phrase length - must be 24 words")

        return TonWallet.from_mnemonic(mnemonic_list, version)
    except Exception as err:
        raise WalletError(f"Error processing wallet data: {err}")


@dataclass
class TonWallet:
    address: str
    mnemonic: list = field(default_factory=list)
    version: str | None = None
    raw_address: str | None = None
    public_key: bytes | None = None
    private_key: str | None = None
    state_init: str | None = None

    @classmethod
    def from_mnemonic(cls, mnemonic: list, version: str):
        public_key, private_key, address, state_init = _derive_wallet(mnemonic, version)

        return cls(
            address=address.to_str(is_user_friendly=True, is_url_safe=True, is_bounceable=False),
            mnemonic=list(mnemonic),
            version=version.lower(),
            raw_address=address.to_str(is_user_friendly=False),
            public_key=bytes(public_key),
            private_key=bytes(private_key).hex(),
            state_init=b64encode(state_init.serialize().to_boc(hash_crc32=True)).decode(),
        )

    @classmethod
    def from_address(cls, address: str):
        return cls(address=address.strip())

    @property
    def short_seed(self):
        return " ".join(self.mnemonic)[:20] + "..."

    @property
    def can_sign(self):
        return self.private_key is not None

    def sign_ton_proof(self, domain: str, payload: str, timestamp: int):
        # https://docs.ton.org/develop/dapps/ton-connect/sign
        if not self.can_sign:
            raise WalletError(f"Wallet {self.address} has no private key to sign ton_proof")

        workchain, address_hash = self.raw_address.split(":")
        domain_bytes = domain.encode()

        message = (
            b"ton-proof-item-v2/"
            + int(workchain).to_bytes(4, "big", signed=True)
            + bytes.fromhex(address_hash)
            + len(domain_bytes).to_bytes(4, "little")
            + domain_bytes
            + timestamp.to_bytes(8, "little")
            + payload.encode()
        )
        full_message = b"\xff\xff" + b"ton-connect" + sha256(message).digest()

        signing_key = SigningKey(bytes.fromhex(self.private_key)[:32])
        return signing_key.sign(sha256(full_message).digest()).signature

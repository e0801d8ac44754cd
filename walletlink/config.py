
DEFAULT_WALLET_ID = 698983191
WORKCHAIN = 0
TON_MAINNET_CHAIN = "-239"

ADDRESS_ONLY_PLATFORMS = ["paws"]

INPUT_FILES = {
    "seeds": "input_data/seed.txt",
    "queries": "input_data/query.txt",
    "wallets": "input_data/wallet.txt",
    "proxies": "input_data/proxies.txt",
}

BLUM = {
    "origin": "https://telegram.blum.codes",
    "proof_domain": "telegram.blum.codes",
    "auth": "https://user-domain.blum.codes/api/v1/auth/provider/PROVIDER_TELEGRAM_MINI_APP",
    "balance": "https://game-domain.blum.codes/api/v1/user/balance",
    "connect": "https://wallet-domain.blum.codes/api/v1/wallet/connect",
    "disconnect": "https://wallet-domain.blum.codes/api/v1/wallet/disconnect",
}

YESCOIN = {
    "origin": "https://www.yescoin.gold",
    "login": "https://api-backend.yescoin.gold/user/login",
    "connect": "https://api-backend.yescoin.gold/wallet/bind",
    "disconnect": "https://api-backend.yescoin.gold/wallet/unbind",
}

TSUBASA = {
    "origin": "https://app.ton.tsubasa-rivals.com",
    "connect": "https://api.app.ton.tsubasa-rivals.com/api/wallet/connect",
    "disconnect": "https://api.app.ton.tsubasa-rivals.com/api/wallet/disconnect",
}

PAWS = {
    "origin": "https://app.paws.community",
    "auth": "https://api.paws.community/v1/user/auth",
    "wallet": "https://api.paws.community/v1/user/wallet",
}

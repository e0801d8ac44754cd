from base64 import b64encode
from uuid import uuid4
from time import time

from walletlink.retry import retry
from walletlink.browser import Browser
import walletlink.config as config


class BlumService(Browser):

    ORIGIN = config.BLUM["origin"]

    @retry("Blum", to_raise=False)
    async def login(self, query: str):
        r = await self.send_request(
            method="POST",
            url=config.BLUM["auth"],
            json={"query": query},
        )
        token = r.json().get("token", {}).get("access")
        if not token:
            raise Exception(f'Unexpected auth response: {r.text}')
        return token


    def build_ton_proof(self):
        timestamp = int(time())
        payload = uuid4().hex
        domain = config.BLUM["proof_domain"]
        signature = self.wallet.sign_ton_proof(domain=domain, payload=payload, timestamp=timestamp)

        return {
            "account": {
                "address": self.wallet.raw_address,
                "chain": config.TON_MAINNET_CHAIN,
                "publicKey": self.wallet.public_key.hex(),
            },
            "tonProof": {
                "name": "ton_proof",
                "proof": {
                    "timestamp": timestamp,
                    "domain": {"lengthBytes": len(domain.encode()), "value": domain},
                    "signature": b64encode(signature).decode(),
                    "payload": payload,
                    "stateInit": self.wallet.state_init,
                },
            },
        }


    @retry("Blum", to_raise=False)
    async def connect_wallet(self):
        r = await self.send_request(
            method="POST",
            url=config.BLUM["connect"],
            json=self.build_ton_proof(),
            headers=self.auth_headers(),
        )
        if r.status_code != 200:
            raise Exception(f'Unexpected connect response: {r.text}')
        return True


    @retry("Blum", to_raise=False)
    async def disconnect_wallet(self):
        r = await self.session.delete(
            url=config.BLUM["disconnect"],
            headers=self.auth_headers(),
        )
        if r.status_code != 200:
            raise Exception(f'Unexpected disconnect response: {r.text}')
        return True


    @retry("Blum", to_raise=False)
    async def get_balance(self):
        r = await self.send_request(
            method="GET",
            url=config.BLUM["balance"],
            headers=self.auth_headers(),
        )
        balance = r.json()
        if "availableBalance" not in balance:
            raise Exception(f'Unexpected balance response: {r.text}')
        return balance

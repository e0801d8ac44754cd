from walletlink.retry import retry
from walletlink.browser import Browser
import walletlink.config as config


class PawsService(Browser):

    ORIGIN = config.PAWS["origin"]

    @retry("PAWS", to_raise=False)
    async def login(self, query: str):
        r = await self.send_request(
            method="POST",
            url=config.PAWS["auth"],
            json={"data": query},
        )
        response = r.json()
        if not response.get("success") or not response.get("data"):
            raise Exception(f'Unexpected auth response: {r.text}')

        # data is [token, user_info]
        token = response["data"]
        return token[0] if isinstance(token, list) else token


    async def set_wallet(self, address: str):
        r = await self.send_request(
            method="POST",
            url=config.PAWS["wallet"],
            json={"wallet": address},
            headers=self.auth_headers(),
        )
        if not r.json().get("success"):
            raise Exception(f'Unexpected wallet response: {r.text}')
        return True


    @retry("PAWS", to_raise=False)
    async def connect_wallet(self):
        return await self.set_wallet(self.wallet.address)


    @retry("PAWS", to_raise=False)
    async def disconnect_wallet(self):
        return await self.set_wallet("")

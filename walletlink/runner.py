from dataclasses import dataclass
from loguru import logger

from walletlink.wallet import TonWallet, process_wallet_data
from walletlink.database import Account, DataBase
from walletlink.utils import sleeping, make_banner, TgReport
from walletlink.yescoin import YesCoinService
from walletlink.tsubasa import TsubasaService
from walletlink.paws import PawsService
from walletlink.blum import BlumService
import walletlink.config as config
from settings import SLEEP_BETWEEN_ACCOUNTS


SERVICES = {
    "blum": BlumService,
    "yescoin": YesCoinService,
    "tsubasa": TsubasaService,
    "paws": PawsService,
}

ACTION_TITLES = {
    "connect": "Connecting",
    "disconnect": "Disconnecting",
    "display": "Displaying",
}

LOGIN_ERRORS = {
    "blum": "Failed to get token",
}


@dataclass
class Summary:
    success_count: int = 0
    fail_count: int = 0
    total_balance: float = 0.0

    def as_text(self, show_balance: bool = False):
        lines = []
        if show_balance:
            lines.append(f"Total Balance: {self.total_balance:.2f}".rjust(35))
        lines.append(f"Success: {self.success_count} | Failed: {self.fail_count}".rjust(35))
        return "\n".join(lines)


def get_service(platform: str, proxy: str | None = None, label: str = ""):
    if platform not in SERVICES:
        raise ValueError(f'Unsupported platform "{platform}"')
    return SERVICES[platform](proxy=proxy, label=label)


class WalletsRunner:
    def __init__(self, action: str, version: str | None, platform: str, db: DataBase | None = None):
        self.action = action
        self.version = version
        self.platform = platform
        self.db = db
        self.summary = Summary()


    @property
    def address_only(self):
        return self.platform in config.ADDRESS_ONLY_PLATFORMS


    def get_title(self):
        version = "" if self.address_only else f"{self.version.upper()} "
        return f"{ACTION_TITLES[self.action]} {version}Wallets on {self.platform.upper()}"


    def success(self, account: Account, text: str):
        self.summary.success_count += 1
        logger.success(f'[+] Account {account.index} - {text}')
        if self.db: self.db.append_report(index=account.index, text=text, success=True)


    def fail(self, account: Account, text: str):
        self.summary.fail_count += 1
        logger.error(f'[-] Account {account.index} - {text}')
        if self.db: self.db.append_report(index=account.index, text=text, success=False)


    def log_wallet(self, wallet: TonWallet, indent: str = "   "):
        if not self.address_only:
            logger.info(f'{indent}Seed: {wallet.short_seed}')
        logger.info(f'{indent}Address: {wallet.address}')


    async def prepare_service(self, account: Account, service):
        """Log in and initialize the service. Returns the wallet, or None after counting a failure."""
        if self.address_only:
            if not account.address:
                self.fail(account, "Invalid wallet address")
                return None
            wallet = TonWallet.from_address(account.address)
        else:
            wallet = process_wallet_data(account.mnemonic, self.version)

        if self.platform == "tsubasa":
            service.init(account.query, wallet)
            return wallet

        token = await service.login(account.query)
        if not token:
            self.fail(account, LOGIN_ERRORS.get(self.platform, "Failed to login"))
            return None

        initialized = service.init(token, wallet)
        if self.address_only and not initialized:
            self.fail(account, "Failed to initialize service")
            return None

        return wallet


    async def run_action(self, account: Account, service, wallet: TonWallet):
        if self.action == "connect":
            if not await service.connect_wallet():
                self.fail(account, "Failed to connect wallet")
                return

            balance = None
            if self.platform == "blum" and hasattr(service, "get_balance"):
                balance_info = await service.get_balance()
                if balance_info:
                    balance = float(balance_info["availableBalance"])
                    self.summary.total_balance += balance

            # counted only once the balance is read, a bad balance is a failure
            self.success(account, "Wallet connection successful")
            self.log_wallet(wallet)
            if balance is not None:
                logger.info(f'   Balance: {balance}')

        elif self.action == "disconnect":
            if await service.disconnect_wallet():
                self.success(account, "Wallet disconnected successfully")
            else:
                self.fail(account, "Failed to disconnect wallet")

        else:
            logger.info(f'Account {account.index}:')
            self.log_wallet(wallet, indent="")
            self.summary.success_count += 1
            if self.db: self.db.append_report(index=account.index, text=wallet.address, success=True)


    async def run(self, accounts: list):
        if self.db:
            self.db.clear_report()
            if self.db.window_name: self.db.window_name.set_accounts(accs_amount=len(accounts))
        logger.info(make_banner(self.get_title(), width=90, title_width=55) + "\n")

        for position, account in enumerate(accounts, start=1):
            logger.info(f'[•] Processing Wallet {position}/{len(accounts)}\n{"-" * 30}')

            service = None
            try:
                service = get_service(self.platform, proxy=account.proxy, label=f"Account {account.index}")
                wallet = await self.prepare_service(account, service)
                if wallet is None:
                    continue

                await self.run_action(account, service, wallet)

                if position < len(accounts):
                    await sleeping(SLEEP_BETWEEN_ACCOUNTS)

            except Exception as err:
                self.fail(account, f"Error: {err}")

            finally:
                if service is not None:
                    await service.close()
                if self.db and self.db.window_name:
                    self.db.window_name.add_acc()

        summary_text = self.summary.as_text(show_balance=self.action == "connect" and self.platform == "blum")
        logger.success("\n" + "=" * 50 + "\n" + summary_text + "\n" + "=" * 50)

        if self.db:
            await TgReport().send_log(logs=self.db.get_report(title=f"<b>{self.get_title()}</b>\n{summary_text.strip()}"))

        return self.summary


async def process_wallets(action: str, accounts: list, version: str | None, platform: str, db: DataBase | None = None):
    return await WalletsRunner(action=action, version=version, platform=platform, db=db).run(accounts)

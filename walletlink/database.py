from dataclasses import dataclass
from random import shuffle
from os import path
from loguru import logger

from walletlink.retry import DataBaseError
from walletlink.utils import WindowName, format_proxy
import walletlink.config as config
from settings import SHUFFLE_WALLETS


@dataclass
class Account:
    index: int
    query: str
    mnemonic: str | None = None
    address: str | None = None
    proxy: str | None = None


class DataBase:
    def __init__(self, input_files: dict | None = None):
        self.input_files = {**config.INPUT_FILES, **(input_files or {})}
        self.window_name = None
        self.reports = {}


    def read_lines(self, file_key: str, required: bool = True):
        file_name = self.input_files[file_key]
        if not path.isfile(file_name):
            if required:
                raise DataBaseError(f'File "{file_name}" not found')
            return []

        with open(file_name, encoding="utf-8") as f:
            return [line.strip() for line in f.read().splitlines() if line.strip()]


    def load_proxies(self, accounts_amount: int):
        proxies = [
            format_proxy(proxy)
            for proxy in self.read_lines("proxies", required=False)
            if format_proxy(proxy)
        ]
        if not proxies:
            return [None for _ in range(accounts_amount)]

        return list(proxies * (accounts_amount // len(proxies) + 1))[:accounts_amount]


    def load_accounts(self, platform: str):
        queries = self.read_lines("queries")

        if platform in config.ADDRESS_ONLY_PLATFORMS:
            wallets = self.read_lines("wallets")
            if len(wallets) != len(queries):
                raise DataBaseError(f'Mismatch between wallets ({len(wallets)}) and query ({len(queries)}) count')
            wallets_data = [{"address": address} for address in wallets]

        else:
            seeds = self.read_lines("seeds")
            if len(seeds) != len(queries):
                raise DataBaseError(f'Mismatch between seeds ({len(seeds)}) and query ({len(queries)}) count')
            wallets_data = [{"mnemonic": seed} for seed in seeds]

        proxies = self.load_proxies(len(queries))
        accounts = [
            Account(index=index, query=query, proxy=proxy, **wallet_data)
            for index, (query, wallet_data, proxy) in enumerate(zip(queries, wallets_data, proxies), start=1)
        ]
        if SHUFFLE_WALLETS:
            shuffle(accounts)

        if self.window_name is None: self.window_name = WindowName(accs_amount=len(accounts))
        else: self.window_name.set_accounts(accs_amount=len(accounts))

        if all(proxy is None for proxy in proxies):
            logger.warning(f'[!] Soft | You will not use proxy')
        logger.info(f'Loaded {len(accounts)} wallet(s) with matching queries\n')
        return accounts


    def append_report(self, index: int, text: str, success: bool = None):
        status_smiles = {True: '✅ ', False: "❌ ", None: ""}

        if not self.reports.get(index): self.reports[index] = {'texts': [], 'success_rate': [0, 0]}

        self.reports[index]["texts"].append(status_smiles[success] + text)
        if success != None:
            self.reports[index]["success_rate"][1] += 1
            if success == True: self.reports[index]["success_rate"][0] += 1


    def clear_report(self):
        self.reports = {}


    def get_report(self, title: str):
        if not self.reports:
            return f'{title}\n\nNo actions'

        logs_text = '\n'.join(
            f'<b>Account {index}</b> | ' + ' | '.join(self.reports[index]["texts"])
            for index in sorted(self.reports)
        )
        success = sum(report["success_rate"][0] for report in self.reports.values())
        total = sum(report["success_rate"][1] for report in self.reports.values())

        return f'{title}\n\n{logs_text}\n\nSuccess rate {success}/{total}'

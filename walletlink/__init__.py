# tools
from .utils import choose_mode, choose_platform, choose_version, choose_after_batch, TgReport
from .database import DataBase, Account
from .browser import Browser
from .wallet import TonWallet, get_wallet_address, process_wallet_data

# platforms
from .blum import BlumService
from .yescoin import YesCoinService
from .tsubasa import TsubasaService
from .paws import PawsService
from .runner import process_wallets, get_service, Summary

from loguru import logger
from time import sleep
import asyncio
import os

from walletlink import *
from walletlink.retry import DataBaseError
from walletlink.config import ADDRESS_ONLY_PLATFORMS
from settings import DEFAULT_VERSION


if __name__ == '__main__':
    if os.name == "nt":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        db = DataBase()

        platform = choose_platform()
        logger.info(f'Selected platform: {platform.upper()}')

        version = None if platform in ADDRESS_ONLY_PLATFORMS else choose_version(default=DEFAULT_VERSION)
        if version:
            logger.info(f'Selected version: {version.upper()}')

        accounts = db.load_accounts(platform=platform)

        while True:
            mode = choose_mode()
            if mode.type == "exit":
                break

            asyncio.run(process_wallets(
                action=mode.soft_id,
                accounts=accounts,
                version=version,
                platform=platform,
                db=db,
            ))

            if choose_after_batch().type == "exit":
                break
            print('')

        sleep(0.1)
        logger.info('Exiting program. Goodbye!')

    except DataBaseError as e:
        logger.error(f'[-] Database | {e}')

    except KeyboardInterrupt:
        pass

    finally:
        logger.info('[•] Soft | Closed')

from datetime import datetime
from random import uniform
from loguru import logger
from tqdm import tqdm
import asyncio
import sys
sys.__stdout__ = sys.stdout # error with `import inquirer` without this string in some system


logger.remove()
logger.add(sys.stderr, format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>")


async def sleeping(*timing):
    if type(timing[0]) in [list, tuple]: timing = timing[0]
    if len(timing) == 2: x = uniform(timing[0], timing[1])
    else: x = timing[0]
    if x <= 0: return

    desc = datetime.now().strftime('%H:%M:%S')
    for _ in tqdm(range(int(x)), desc=desc, bar_format='{desc} | [•] Sleeping {n_fmt}/{total_fmt}'):
        await asyncio.sleep(1)
    await asyncio.sleep(x - int(x))


def make_banner(text: str, width: int = 50, title_width: int = 30):
    return "\n" + "=" * width + "\n" + text.rjust(title_width) + "\n" + "=" * width


def format_proxy(proxy: str | None):
    if proxy in ['https://log:pass@ip:port', 'http://log:pass@ip:port', 'log:pass@ip:port', '', ' ', '\n', None]:
        return None
    return "http://" + proxy.removeprefix("https://").removeprefix("http://")

import asyncio
from loguru import logger

from settings import RETRY

from json.decoder import JSONDecodeError


class CustomError(Exception): pass

class DataBaseError(Exception): pass

class WalletError(Exception): pass


def have_json(func):
    async def wrapper(*args, **kwargs):
        response = await func(*args, **kwargs)
        try:
            response.json()
        except (JSONDecodeError, ValueError):
            error_msg = response.text[:350].replace("\n", " ")
            raise Exception(f'bad json response: {error_msg}')

        return response
    return wrapper


def retry(
        source: str,
        module_str: str = None,
        exceptions = Exception,
        retries: int = None,
        not_except = (CustomError,),
        to_raise: bool = True,
        sleep_on_error: int = 2,
):
    def decorator(f):
        custom_module_str = f.__name__.replace('_', ' ').title() if not module_str else module_str
        async def newfn(*args, **kwargs):
            max_retries = retries or RETRY
            attempt = 0
            while attempt < max_retries:
                try:
                    return await f(*args, **kwargs)

                except not_except as e:
                    if to_raise: raise e.__class__(f'{custom_module_str}: {e}')
                    else: return False

                except exceptions as e:
                    label = getattr(args[0], "label", None) if args else None
                    error_owner = f"{label} | " if label else ""

                    attempt += 1
                    logger.error(f"[-] {error_owner}{source} | {custom_module_str} | {e} [{attempt}/{max_retries}]")

                    if attempt == max_retries:
                        if to_raise: raise ValueError(f'{custom_module_str}: {e}')
                        else: return False

                    await asyncio.sleep(sleep_on_error)
        return newfn
    return decorator

from loguru import logger
from aiohttp import ClientSession

from settings import TG_BOT_TOKEN, TG_USER_ID


class TgReport:
    @staticmethod
    def split_text(text: str, chunk_size: int = 1900):
        texts = []
        while len(text) > 0:
            texts.append(text[:chunk_size])
            text = text[chunk_size:]
        return texts


    async def send_log(self, logs: str):
        if not TG_BOT_TOKEN or not logs:
            return

        async with ClientSession() as session:
            for tg_id in TG_USER_ID:
                for text in self.split_text(logs):
                    try:
                        r = await session.post(
                            url=f'https://api.telegram.org/bot{TG_BOT_TOKEN}/sendMessage',
                            json={
                                'parse_mode': 'html',
                                'disable_web_page_preview': True,
                                'chat_id': tg_id,
                                'text': text,
                            }
                        )
                        response = await r.json()
                        if response.get("ok") != True: raise Exception(str(response))
                    except Exception as err: logger.error(f'[-] TG | Send Telegram message error to {tg_id}: {err}\n{text}')


SHUFFLE_WALLETS         = False                         # True | False - перемешивать ли аккаунты перед обработкой
RETRY                   = 3                             # кол-во попыток для каждого запроса к платформе

SLEEP_BETWEEN_ACCOUNTS  = [1, 3]                        # задержка между аккаунтами (секунды, от и до)

DEFAULT_VERSION         = "v4"                          # версия кошелька, если в меню выбрано что-то непонятное
                                                        # "v3r2" | "v4"

# --- PERSONAL SETTINGS ---

TG_BOT_TOKEN            = ''                            # токен от тг бота (`12345:Abcde`) для уведомлений. если не нужно - оставляй пустым
TG_USER_ID              = []                            # тг айди куда должны приходить уведомления.
                                                        # [21957123] - для отправления уведомления только себе
                                                        # [21957123, 103514123] - отправлять нескольким людями

from inspect import getsourcefile
import ctypes
import os


windll = ctypes.windll if os.name == 'nt' else None # for Mac users


class WindowName:
    def __init__(self, accs_amount: int):
        try: self.path = os.path.abspath(getsourcefile(lambda: 0)).split("\\")[-4]
        except IndexError: self.path = os.path.abspath(getsourcefile(lambda: 0)).split("/")[-4]

        self.accs_amount = accs_amount
        self.accs_done = 0

        self.update_name()

    def update_name(self):
        if os.name == 'nt':
            windll.kernel32.SetConsoleTitleW(f'Wallet Linker [{self.accs_done}/{self.accs_amount}] | {self.path}')

    def add_acc(self):
        self.accs_done += 1
        self.update_name()

    def set_accounts(self, accs_amount: int):
        self.accs_done = 0
        self.accs_amount = accs_amount
        self.update_name()

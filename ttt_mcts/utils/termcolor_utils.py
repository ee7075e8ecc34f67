import colorama


class TermcolorUtils:
    @staticmethod
    def red(value: str | int | float) -> str:
        text = colorama.Fore.RED + str(value) + colorama.Style.RESET_ALL
        return text

    @staticmethod
    def green(value: str | int | float) -> str:
        text = colorama.Fore.GREEN + str(value) + colorama.Style.RESET_ALL
        return text

    @staticmethod
    def cyan(value: str | int | float) -> str:
        text = colorama.Fore.CYAN + str(value) + colorama.Style.RESET_ALL
        return text

    @staticmethod
    def magenta(value: str | int | float) -> str:
        text = colorama.Fore.MAGENTA + str(value) + colorama.Style.RESET_ALL
        return text

    @staticmethod
    def percent(rate: float) -> str:
        """Format a rate in [0, 1] as a percentage, green above one half, red below one tenth."""
        text = f"{rate * 100:5.1f}%"
        if rate >= 0.5:
            return TermcolorUtils.green(text)
        if rate < 0.1:
            return TermcolorUtils.red(text)
        return text

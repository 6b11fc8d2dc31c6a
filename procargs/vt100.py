CYAN = "\033[36m"
YELLOW = "\033[33m"
RESET = "\033[0m"

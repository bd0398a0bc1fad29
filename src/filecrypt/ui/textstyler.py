from filecrypt.ui.constants import RESET, TEXT_STYLES


def _style(kind: str, *parts) -> str:
    return f"{TEXT_STYLES[kind]}{' '.join(str(p) for p in parts)}{RESET}"


def plain(*parts) -> str:
    return _style("base", *parts)


def success(*parts) -> str:
    return _style("success", *parts)


def error(*parts) -> str:
    return _style("error", *parts)


def title(*parts) -> str:
    return _style("title", *parts)


def subtitle(*parts) -> str:
    return _style("subtitle", *parts)


def label(*parts) -> str:
    return _style("label", *parts)

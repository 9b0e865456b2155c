"""Expansion of ``$`` parameters in pipeline segments."""

from .quotes import DOUBLE, UNQUOTED, quote_state

_DIGITS = "0123456789"


def _is_alnum(char):
    return char.isascii() and char.isalnum()


def _is_positional(key):
    return bool(key) and (key[0] in _DIGITS or key[0] in "@*")


def _check_special(text, index):
    """Return False if the character after a ``$`` cannot start a parameter."""
    char = text[index]
    code = ord(char)
    if 36 < code < 48 and char != "*":
        return False
    if 57 < code <= 62 or 122 < code < 127 or 90 < code < 97:
        return False
    if char == "$":
        end = text.find(" ", index)
        if end == -1:
            end = len(text)
        if not any(_is_alnum(ch) or ch == "_" for ch in text[index:end]):
            return False
    return True


def _is_valid_dollar(text, index):
    """Return True unless the ``$`` at ``index`` sits inside single quotes."""
    size = len(text)
    end = index
    while end < size and (
        text[end] != " " or quote_state(text, end) != UNQUOTED
    ):
        end += 1
    word = text[index:end]
    doubles = word.count('"') % 2
    singles = word.count("'") % 2
    return (
        not singles
        or (doubles and singles and word[-1] != "'")
        or (singles and quote_state(text, end) == DOUBLE)
    )


def is_expandable_dollar(text, index):
    """Return True if the ``$`` at ``index`` of ``text`` starts an expansion."""
    if index >= len(text) or text[index] != "$":
        return False
    following = text[index + 1] if index + 1 < len(text) else ""
    if following in ("", " "):
        return False
    if following == "{" and "}" in text[index + 2:]:
        return True
    if following not in "\"'" and _check_special(text, index + 1):
        return bool(_is_valid_dollar(text, index))
    return False


def count_dollars(text):
    """Count the words of ``text`` whose first ``$`` starts an expansion."""
    if "$" not in text or len(text) <= 1:
        return 0
    count = 0
    size = len(text)
    index = 0
    while index < size:
        while index < size and text[index] != "$":
            index += 1
        if index < size and is_expandable_dollar(text, index):
            count += 1
        while index < size and text[index] != " ":
            index += 1
    return count


def lookup_key(key, env, last_status=0):
    """Return the value of parameter ``key``.

    ``#`` becomes ``0`` and ``?`` the last exit status, each followed by the
    rest of ``key``; any other key is looked up in ``env``, defaulting to "".
    """
    if key.startswith("#"):
        return "0" + key[1:]
    if key.startswith("?"):
        return str(last_status) + key[1:]
    return env.get(key, "")


def _name_end(key):
    """Index of the first character that cannot belong to a name, or 0."""
    for index, char in enumerate(key):
        if not _is_alnum(char) and char not in "<>_":
            return index
    return 0


def _expand_name(key, env, last_status):
    if _is_positional(key):
        return key[1:]
    end = _name_end(key)
    if not end:
        return lookup_key(key, env, last_status)
    name, rest = key[:end], key[end:]
    if name in env:
        return env[name] + rest
    return rest


def _expand_joined(key, env, last_status):
    """Expand a key such as ``A$B`` in which names are joined by ``$``."""
    ends_dollar = key.endswith("$")
    ends_dollar_quote = not ends_dollar and key.endswith('$"')
    trailing_quote = len(key) >= 2 and key[-1] == '"' and key[-2] != "$"
    body = key[:-1] if trailing_quote else key
    result = "".join(
        _expand_name(part, env, last_status)
        for part in body.split("$")
        if part
    )
    if ends_dollar_quote:
        result += '$"'
    elif trailing_quote:
        result += '"'
    elif ends_dollar:
        result += "$"
    return result


def _expand_after_dollars(key, env, last_status):
    """Expand a key that starts with ``$`` and holds another ``$`` later on."""
    size = len(key)
    index = 0
    while index < size and key[index] == "$":
        index += 1
    while index < size and key[index] != "$":
        index += 1
    prefix = key[:index]
    while index < size and key[index] == "$":
        index += 1
    return prefix + _expand_key(key[index:], env, last_status)


def _expand_key(key, env, last_status):
    if _is_positional(key):
        return key[1:]
    if key.startswith("$"):
        if "$" not in key[1:]:
            return key
        return _expand_after_dollars(key, env, last_status)
    if "$" in key[1:]:
        return _expand_joined(key, env, last_status)
    return _expand_name(key, env, last_status)


def _expand_token(text, start, end, env, last_status):
    """Expand the word ``text[start:end]`` that follows a ``$``."""
    if text[start] == "{":
        close = text.find("}", start + 1)
        if close != -1:
            return lookup_key(text[start + 1:close], env, last_status)
        return text[start:end]
    return _expand_key(text[start:end], env, last_status)


def _word_end(text, index):
    end = text.find(" ", index)
    return len(text) if end == -1 else end


def _plain_end(text, index):
    """Index of the next expandable ``$`` at or after ``index``, or the end."""
    size = len(text)
    while index < size and text[index] != "$":
        index += 1
    if index < size and not is_expandable_dollar(text, index):
        index += 1
        while index < size and (
            text[index] != "$" or not is_expandable_dollar(text, index)
        ):
            index += 1
    return index


def expand_dollars(text, env, last_status=0):
    """Return ``text`` with its ``$`` parameters replaced from ``env``.

    Text with no expandable ``$`` comes back unchanged.
    """
    if not count_dollars(text):
        return text
    pieces = []
    size = len(text)
    index = 0
    while index < size:
        if text[index] == "$" and is_expandable_dollar(text, index):
            end = _word_end(text, index)
            pieces.append(_expand_token(text, index + 1, end, env, last_status))
            index = end
            if index < size:
                plain_end = _plain_end(text, index)
                pieces.append(text[index:plain_end])
                index = plain_end
        else:
            plain_end = _plain_end(text, index)
            pieces.append(text[index:plain_end])
            index = plain_end
            if index < size:
                end = _word_end(text, index)
                pieces.append(
                    _expand_token(text, index + 1, end, env, last_status)
                )
                index = end
    return "".join(pieces)
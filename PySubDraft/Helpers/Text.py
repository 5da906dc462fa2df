import regex

_tag_pattern = regex.compile(r'<[^>]*>?|>')
_bracket_pattern = regex.compile(r'[\[\]]')

def WrapDraftContent(text : str, font_path : str, font_size : float = 5.0) -> str:
    """
    Embed plain text in the rich-text markup used for draft text materials.
    The literal text is enclosed in square brackets.
    """
    return (f'<font id="" path="{font_path}">'
            f'<color=(1.000000, 1.000000, 1.000000, 1.000000)>'
            f'<size={font_size:.6f}>[{text}]</size></color></font>')

def CleanDraftContent(content : str) -> str:
    """
    Recover plain text from draft rich-text markup: strip tags and brackets, decode &lt; and &gt;
    """
    if not content:
        return content

    text = _tag_pattern.sub('', content)
    text = _bracket_pattern.sub('', text)
    return text.replace('&lt;', '<').replace('&gt;', '>')

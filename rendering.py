from markdown_it import MarkdownIt


def render_markdown(text, extensions=None):
    """Convert markdown text to HTML with the CommonMark rule set.

    Raw HTML in the source is passed through. ``extensions`` names extra
    markdown-it rules to enable, e.g. ``['table', 'strikethrough']``.
    """
    md = MarkdownIt('commonmark')
    if extensions:
        md.enable(list(extensions))
    return md.render(text)

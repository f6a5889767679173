from flask import Flask, render_template, current_app
import logging

from entries import birthtime_supported, build_listing_context, load_entry, scan_entries
from errors import BlogError
from rendering import render_markdown

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# Static assets are served at the web root
app = Flask(__name__, static_folder='static', static_url_path='')
app.config.update(
    ENTRIES_DIR='entries',
    ENTRY_URL_PREFIX='entries',
    # Platforms without any creation-time API sort by modification time
    MTIME_FALLBACK=not birthtime_supported(),
    MARKDOWN_EXTENSIONS=[],
)


@app.route('/')
def index():
    entries = scan_entries(
        current_app.config['ENTRIES_DIR'],
        mtime_fallback=current_app.config['MTIME_FALLBACK'],
        url_prefix=current_app.config['ENTRY_URL_PREFIX'],
    )
    context = build_listing_context(entries)
    return render_template('main-page.html', **context)


@app.route('/entries/<name>')
def get_entry(name):
    markdown_text = load_entry(current_app.config['ENTRIES_DIR'], name)
    html_content = render_markdown(markdown_text, current_app.config['MARKDOWN_EXTENSIONS'])
    return render_template('entry.html', content=html_content)


@app.errorhandler(BlogError)
def handle_blog_error(e):
    if e.status_code >= 500:
        logging.error(f"{type(e).__name__}: {e.detail}")
    else:
        logging.warning(f"{type(e).__name__}: {e.detail}")
    return e.message, e.status_code


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, debug=True)

# HTML pages for the demo. Handlers pass plain data in; nothing here
# touches the registry.

from html import escape
from typing import List
from urllib.parse import quote

PAGE_STYLE = """
        <style>
            body {
                font-family: Arial, sans-serif;
                max-width: 40rem;
                margin: 2rem auto;
                color: #333;
            }
            li { margin: 0.25rem 0; }
        </style>
"""


def _page(title: str, body: str) -> str:
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <title>{escape(title)}</title>
        {PAGE_STYLE}
    </head>
    <body>
        {body}
    </body>
    </html>
    """


def index_page(identifiers: List[str]) -> str:
    items = "\n".join(
        f'<li><a href="/login/{quote(name)}">{escape(name)}</a></li>'
        for name in identifiers
    )
    return _page(
        "TOTP Demo",
        f"""
        <a href="/new">Generate new account</a> or log into existing:
        <ul>
        {items}
        </ul>
        """,
    )


def login_page(username: str) -> str:
    return _page(
        "Login",
        f"""
        <form action="/verify" method="post">
            Username: <input type="text" name="username" value="{escape(username, quote=True)}"><br>
            Code: <input type="text" name="key" autocomplete="one-time-code"><br>
            <input type="submit" value="Login"><br>
        </form>
        """,
    )


def new_account_page() -> str:
    return _page(
        "New account",
        """
        <p>Scan this QR code with your authenticator app</p>
        <img src="/generate" alt="Enrollment QR code">
        <p>
        <a href="/">Return to main page</a>
        """,
    )


def success_page() -> str:
    return _page("Success", 'Success, go back to <a href="/">main page</a>')

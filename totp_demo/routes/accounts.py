# Account routes: landing page, enrollment (QR generation),
# login form and TOTP verification.

from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from totp_demo.errors import GenerationError, RenderError
from totp_demo.routes import pages
from totp_demo.services.account_service import AccountService
from totp_demo.services.verifier import VerificationResult

router = APIRouter(tags=["accounts"])
service = AccountService()

# Same answer for unknown accounts and wrong codes
INVALID_CREDENTIALS = "invalid username or key"


@router.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(content=pages.index_page(service.list_accounts()))


@router.get("/login/{username}", response_class=HTMLResponse)
def login(username: str):
    return HTMLResponse(content=pages.login_page(username))


@router.get("/new", response_class=HTMLResponse)
def new_account():
    return HTMLResponse(content=pages.new_account_page())


@router.get("/generate")
def generate():
    # Provision a new account and return its enrollment QR code
    try:
        account = service.provision_account()
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=f"Error generating key: {e}")
    except RenderError as e:
        raise HTTPException(status_code=500, detail=f"Error generating image: {e}")

    return Response(
        content=account.image,
        media_type="image/png",
        headers={"Cache-Control": "no-store"},
    )


@router.post("/verify")
def verify(username: str = Form(""), key: str = Form("")):
    if not username:
        raise HTTPException(status_code=400, detail="username not given")
    if not key:
        raise HTTPException(status_code=400, detail="key not given")

    result = service.verify(username, key)
    if result is not VerificationResult.ACCEPTED:
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    return RedirectResponse(url="/success", status_code=301)


@router.get("/success", response_class=HTMLResponse)
def success():
    return HTMLResponse(content=pages.success_page())

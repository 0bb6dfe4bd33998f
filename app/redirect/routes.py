# app/redirect/routes.py
from urllib.parse import quote, urlencode

from flask import current_app, redirect

from ..utils.api import err
from ..utils.request import json_body
from . import bp

@bp.post("/webhook-redirect")
def webhook_redirect():
    """CRM contact hand-off: forward the visitor to the payment page with their contact details."""
    data = json_body()
    email = str(data.get("email") or "").strip()
    contact_name = str(data.get("contact_name") or "").strip()
    contact_id = str(data.get("contact_id") or "").strip()

    current_app.logger.info("contact redirect received: email=%s contact_id=%s", email, contact_id)
    if not email or not contact_name:
        return err("Missing required fields", 400)

    query = urlencode({"email": email, "contact_name": contact_name, "contact_id": contact_id},
                     quote_via=quote)
    site = current_app.config["SITE_URL"].rstrip("/")
    return redirect(f"{site}/payment-redirect?{query}", code=302)

from flask import current_app
from flask_cors import CORS

cors = CORS()

PROCESSOR_KEY = "payment_processor"

def init_processor(app, processor=None):
    # None defers building the Stripe client to first use
    app.extensions[PROCESSOR_KEY] = processor

def get_processor():
    processor = current_app.extensions.get(PROCESSOR_KEY)
    if processor is None:
        from .services.processor import StripeProcessor
        processor = StripeProcessor.from_api_key(current_app.config["STRIPE_SECRET_KEY"])
        current_app.extensions[PROCESSOR_KEY] = processor
    return processor

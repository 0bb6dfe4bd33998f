from flask import jsonify

def api_ok(data=None, **extra):
    return {
        **(data or {}),
        **extra,
    }

def api_error(message, data=None):
    return {
        "error": message,
        "success": False,
        **(data or {}),
    }

# ---- standard API response format ------------------------------------------
def ok(data=None, status=200, **extra):
    r = jsonify(api_ok(data, **extra)); r.status_code = status; return r

def err(msg, status=400, data=None):
    r = jsonify(api_error(msg, data)); r.status_code = status; return r

import math
import os
import logging
from flask import request, jsonify
from routes import app

logger = logging.getLogger(__name__)

# Path the square view is mounted on
SQUARE_ROUTE = os.getenv("SQUARE_ROUTE", "/getSquare")


def is_number(value) -> bool:
    # bool is a subclass of int but true/false are not numbers on the wire
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def square(number):
    """Integers stay exact, floats follow IEEE-754."""
    return number * number


@app.route(SQUARE_ROUTE, methods=['POST'])
def get_square():
    data = request.get_json(force=True, silent=True)
    logger.info("data sent for evaluation %s", data)

    if not isinstance(data, dict):
        return jsonify(error="Invalid JSON body"), 400

    if "number" not in data:
        return jsonify(error="Missing 'number'"), 400

    number = data["number"]
    if not is_number(number):
        return jsonify(error="'number' must be numeric"), 400

    answer = square(number)
    if isinstance(answer, float) and not math.isfinite(answer):
        return jsonify(error="'number' is out of range"), 400

    try:
        response = jsonify(answer=answer)
    except ValueError:
        # int too large for str() conversion
        return jsonify(error="'number' is out of range"), 400

    logger.info("My result: %s", answer)
    return response

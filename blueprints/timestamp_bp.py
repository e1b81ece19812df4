# blueprints/timestamp_bp.py
from flask import Blueprint, jsonify, current_app

from timestamps import INVALID_DATE, now_result, parse_date, to_result

timestamp_bp = Blueprint('timestamp_bp', __name__, url_prefix='/api')


# --- Ruta: hora actual ---
@timestamp_bp.route('', methods=['GET'])
def get_now():
    return jsonify(now_result())


# --- Ruta: conversión de fecha / timestamp ---
@timestamp_bp.route('/<date>', methods=['GET'])
def get_date(date):
    current_app.logger.info(f"Fecha recibida: {date}")

    parsed = parse_date(date)
    if parsed is None:
        current_app.logger.error(f"Error al parsear la fecha: {date!r}")
        return jsonify(INVALID_DATE), 422

    if parsed.datestring != date:
        current_app.logger.debug(f"Timestamp {date} convertido a la fecha {parsed.datestring}")

    result = to_result(parsed.unix)
    current_app.logger.debug(f"Fecha convertida: {result['utc']}")
    return jsonify(result)

# clients/console_client.py
import os
import sys
import requests
from datetime import datetime, timezone
from urllib.parse import quote

BASE_URL = os.environ.get("TIMESTAMP_API_URL", "http://127.0.0.1:3000")  # reemplaza por la IP del servidor si corres desde otra máquina
TIMEOUT = 5


def compare_clocks(base_url=BASE_URL):
    """Compara el reloj local contra GET /api."""
    r = requests.get(f"{base_url}/api", timeout=TIMEOUT)
    r.raise_for_status()
    data = r.json()
    server_dt = datetime.fromtimestamp(data['unix'], tz=timezone.utc)
    local_dt = datetime.now(timezone.utc)
    diff = (local_dt - server_dt).total_seconds()
    print("Servidor:", data['utc'])
    print("Local:   ", local_dt.strftime('%a, %d %b %Y %H:%M:%S %z'))
    if diff > 0:
        print(f"La hora local está {diff:.2f} segundos ADELANTADA.")
    elif diff < 0:
        print(f"La hora local está {-diff:.2f} segundos ATRASADA.")
    else:
        print("Las horas coinciden exactamente.")


def convert(value, base_url=BASE_URL):
    """Consulta GET /api/<value> e imprime el resultado."""
    r = requests.get(f"{base_url}/api/{quote(value, safe='')}", timeout=TIMEOUT)
    if r.status_code == 422:
        print("Error:", r.json()["error"])
        return False
    r.raise_for_status()
    data = r.json()
    print("unix:", data['unix'])
    print("utc: ", data['utc'])
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        if argv:
            return 0 if convert(argv[0]) else 1
        compare_clocks()
        return 0
    except requests.exceptions.Timeout:
        print(f"Error: Tiempo de espera excedido ({TIMEOUT * 1000} ms).")
    except (requests.exceptions.RequestException, ValueError, KeyError) as e:
        # ValueError: cuerpo no JSON; KeyError: JSON sin los campos esperados
        print("Error:", e)
    return 1


if __name__ == '__main__':
    sys.exit(main())

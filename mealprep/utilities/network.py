"""Network helper used by mealprep.main to print a LAN-accessible URL."""
import socket


def get_local_ip() -> str:
    """Return the address of the interface the OS would route outbound traffic through.

    Falls back to '127.0.0.1' when there is no usable route. No data is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        return str(s.getsockname()[0])
    except OSError:
        return "127.0.0.1"
    finally:
        s.close()

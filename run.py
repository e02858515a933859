import socket
import uvicorn

from totp_demo.core.config import settings

def get_lan_ip():
    try:
        # Connect to a public DNS server to determine the route
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "127.0.0.1"

def main():
    lan_ip = get_lan_ip()
    port = settings.PORT

    print("\n" + "="*60)
    print(f"🚀 {settings.APP_NAME.upper()} STARTING")
    print(f"📡 LAN URL:  http://{lan_ip}:{port}")
    print(f"🏠 Local:    http://127.0.0.1:{port}")
    print(f"🔑 Issuer:   {settings.ISSUER}")
    print("-" * 60)
    print("⚠️  NOTE: accounts live in memory only and are lost on restart.")
    print("="*60 + "\n")

    # One worker process: the account registry is per-process state
    uvicorn.run(
        "totp_demo.main:app",
        host=settings.HOST,
        port=port,
        workers=1,
        timeout_keep_alive=settings.TIMEOUT_SECONDS,
        log_level=settings.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()

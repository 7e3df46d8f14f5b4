import argparse
import sys

import uvicorn

from nadapi.domain import create_serial_amplifier
from nadapi.server_app import create_app, ServerSettings


class ApiServer:
    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(self.app, host=self.settings.server_ip, port=self.settings.server_port, log_level="info")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="REST API and command line client for NAD amplifiers.")
    parser.add_argument("-d", "--device", required=True, metavar="FILE", help="Path to serial device.")
    parser.add_argument("-x", "--volume", action="store_true", default=None, help="Allow volume adjustment. Use with caution!")
    sub = parser.add_subparsers(dest="subcommand", required=True)

    server = sub.add_parser("server", help="Start API server.")
    server.add_argument("--ip", type=str, default=None, help="IP address to bind the API server to (default 127.0.0.1).")
    server.add_argument("--port", type=int, default=None, help="Port to run the API server on (default 8080).")
    server.add_argument("--static", type=str, default=None, metavar="DIR", help="Directory of static files to serve.")

    cli = sub.add_parser("cli", help="Send command.")
    cli.add_argument("-c", "--command", required=True, help="Command to send, e.g. Power?")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.subcommand == "server":
        # Only flags given on the command line override the environment.
        overrides = {
            "device": args.device,
            "enable_volume": args.volume,
            "static_dir": args.static,
            "server_ip": args.ip,
            "server_port": args.port,
        }
        settings = ServerSettings(**{key: value for key, value in overrides.items() if value is not None})
        ApiServer(settings).start()
        return 0

    amplifier = create_serial_amplifier(args.device, enable_volume=bool(args.volume))
    try:
        reply = amplifier.send_raw(args.command)
    finally:
        amplifier.close()
    print(reply.decode("ascii", errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())

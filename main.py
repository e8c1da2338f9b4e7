#!/usr/bin/env python3
"""
Document Factory Service.
Runs the factory method demo by default; also supports CLI and server modes.
"""
import sys
import argparse

from docfactory.cli import main as cli_main


def server_mode(host: str, port: int):
    """Launch the FastAPI server."""
    import uvicorn
    from docfactory.adapters.fastapi_adapter import app

    print(f"Starting server on {host}:{port}")
    print(f"API Documentation: http://{host}:{port}/docs")

    uvicorn.run(app, host=host, port=port, log_level="info")


def main(argv=None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv

    # No arguments: run the demonstration
    if not argv:
        return cli_main([])

    from docfactory.domain.services.configuration_service import ConfigurationService
    config_service = ConfigurationService()

    parser = argparse.ArgumentParser(description="Document Factory Service")
    subparsers = parser.add_subparsers(dest="mode", help="Execution mode")

    # Server mode
    server_parser = subparsers.add_parser("server", help="Launch the API server")
    server_parser.add_argument("--host", default=config_service.get_server_host(), help="Server IP address")
    server_parser.add_argument("--port", type=int, default=config_service.get_server_port(), help="Server port")

    # CLI mode
    subparsers.add_parser("cli", help="Command line mode (see: main.py cli --help)", add_help=False)

    args, remaining = parser.parse_known_args(argv)

    if args.mode == "server":
        server_mode(args.host, args.port)
        return 0
    elif args.mode == "cli":
        return cli_main(remaining)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Server health check for operators.
Verifies the local setup (interpreter, packages, .env) and probes a running server.
"""

import sys
from importlib import metadata
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import requests
from dotenv import dotenv_values


MIN_PYTHON = (3, 10)
DEFAULT_PORT = "3000"
PROBE_TIMEOUT = 5  # seconds

REQUIRED_PACKAGES = [
    "fastapi",
    "uvicorn",
    "pydantic",
    "pydantic-settings",
    "jinja2",
    "redis",
    "requests",
    "python-dotenv",
]
REQUIRED_ENV_VARS = ["EMAIL_USER", "EMAIL_APP_PASSWORD"]
OPTIONAL_ENV_VARS = ["PORT", "TEST_EMAIL", "ENVIRONMENT"]
PLACEHOLDER_MARKERS = ("your-", "example.com")


def is_placeholder(value: Optional[str]) -> bool:
    """True for empty values and values copied unchanged from .env.example."""
    if not value:
        return True
    return any(marker in value for marker in PLACEHOLDER_MARKERS)


class ServerHealthCheck:
    """Runs each check in order and prints a human-readable report."""

    def __init__(self, project_dir: Path, version_info: Tuple[int, ...] = None):
        self.project_dir = Path(project_dir)
        self.version_info = tuple(version_info or sys.version_info[:3])
        self.env_path = self.project_dir / ".env"

    def check_python_version(self) -> bool:
        print("\n📦 Checking Python version...")
        version = ".".join(str(part) for part in self.version_info)
        minimum = ".".join(str(part) for part in MIN_PYTHON)

        if self.version_info[:2] >= MIN_PYTHON:
            print(f"✓ Python {version} installed (minimum: {minimum})")
            return True
        print(f"✗ Python {version} is too old. Please install Python {minimum} or higher.")
        return False

    def check_dependencies(self, packages: List[str] = REQUIRED_PACKAGES) -> bool:
        print("\n📚 Checking dependencies...")
        missing = []
        for package in packages:
            try:
                metadata.version(package)
            except metadata.PackageNotFoundError:
                missing.append(package)

        print(f"  Dependencies: {len(packages)} packages")
        if missing:
            print(f"✗ Missing packages: {', '.join(missing)}. Run: pip install -e .")
            return False

        print("✓ All required packages are installed")
        return True

    def read_env(self) -> Dict[str, Optional[str]]:
        if not self.env_path.exists():
            return {}
        return dotenv_values(self.env_path)

    def check_env_file(self) -> bool:
        print("\n🔐 Checking .env file...")

        if not self.env_path.exists():
            print("✗ .env file not found")
            print("  Copy .env.example to .env and fill in your credentials")
            print("  Run: cp .env.example .env")
            return False

        print("✓ .env file exists")
        if (self.project_dir / ".env.example").exists():
            print("✓ .env.example file exists (for reference)")

        values = self.read_env()
        all_required_present = True

        print("\n  Required environment variables:")
        for name in REQUIRED_ENV_VARS:
            if name not in values:
                print(f"  ✗ {name}: missing")
                all_required_present = False
            elif is_placeholder(values[name]):
                print(f"  ⚠ {name}: needs to be configured")
                all_required_present = False
            else:
                print(f"  ✓ {name}: ***configured***")

        print("\n  Optional environment variables:")
        for name in OPTIONAL_ENV_VARS:
            if name in values:
                print(f"  ✓ {name}: set")
            else:
                print(f"  ○ {name}: not set (will use defaults)")

        return all_required_present

    def resolve_port(self) -> str:
        print("\n🌐 Checking server port...")
        port = (self.read_env().get("PORT") or "").strip()
        if port:
            print(f"✓ Configured port: {port}")
        else:
            port = DEFAULT_PORT
            print(f"⚠ Using default port: {port}")
        print(f"  Server will run at: http://localhost:{port}")
        return port

    def check_server_running(self, port: str) -> bool:
        print("\n🔄 Checking if server is running...")
        url = f"http://localhost:{port}/health"

        try:
            response = requests.get(url, timeout=PROBE_TIMEOUT)
        except requests.Timeout:
            print("✗ Server request timed out")
            return False
        except requests.ConnectionError:
            print("✗ Server is not running")
            print("  Start it with: python -m app.main")
            return False

        try:
            health = response.json()
        except ValueError:
            print("✗ Invalid response from server")
            return False

        if not isinstance(health, dict) or health.get("status") != "ok":
            print("✗ Server returned unexpected response")
            return False

        print("✓ Server is running and healthy!")
        print(f"  Service: {health.get('service')}")
        print(f"  Timestamp: {health.get('timestamp')}")
        return True

    def list_endpoints(self, port: str) -> None:
        print("\n📧 Email service endpoints:")
        print(f"  Test email: http://localhost:{port}/test")
        print(f"  Send confirmation: http://localhost:{port}/send-confirmation")

    def run(self) -> Dict[str, object]:
        results: Dict[str, object] = {}

        results["python_version"] = self.check_python_version()
        results["dependencies"] = self.check_dependencies()
        results["env_file"] = self.check_env_file()
        results["port"] = self.resolve_port()

        results["server_running"] = False
        if results["python_version"] and results["dependencies"] and results["env_file"]:
            results["server_running"] = self.check_server_running(results["port"])
            if results["server_running"]:
                self.list_endpoints(results["port"])

        return results


def print_summary(results: Dict[str, object]) -> None:
    print("\n" + "=" * 50)
    print("📊 HEALTH CHECK SUMMARY")
    print("=" * 50)

    checks = {name: value for name, value in results.items() if name != "port"}
    passed = sum(1 for value in checks.values() if value)
    print(f"\nPassed: {passed}/{len(checks)}")

    if passed == len(checks):
        print("\n✨ All checks passed! Your server is ready to go.")
        print("\nNext steps:")
        print(f"  1. Test email: curl http://localhost:{results['port']}/test")
        print("  2. Open the booking page in your browser")
    else:
        print("\n⚠️  Some checks failed. Please fix the issues above.")
        print("\nCommon fixes:")
        print("  - Run: pip install -e .")
        print("  - Run: cp .env.example .env")
        print("  - Edit .env with your credentials")
        print("  - Start the server: python -m app.main")

    print("\n" + "=" * 50 + "\n")


def main(project_dir: Optional[Path] = None) -> int:
    """Run every check; exit code 0 only when the server answered its health probe."""
    print("\n╔══════════════════════════════════════════════╗")
    print("║   🌙 Luna Massage - Server Health Check      ║")
    print("╚══════════════════════════════════════════════╝")

    results = ServerHealthCheck(project_dir or Path.cwd()).run()
    print_summary(results)
    return 0 if results["server_running"] else 1

import subprocess
from typing import Dict, List, Optional


class FakeRunner:
    """
    Stand-in for docpublish.runner.run_command.
    Records every command; `codes` maps a program name to its exit code and
    `errors` maps a program name to an exception to raise instead.
    """

    def __init__(self, codes: Optional[Dict[str, int]] = None, errors: Optional[Dict[str, Exception]] = None):
        self.codes = codes or {}
        self.errors = errors or {}
        self.calls: List[dict] = []

    def __call__(self, cmd, *, cwd=None, capture_output=False, check=False):
        argv = [str(part) for part in cmd]
        self.calls.append({"cmd": argv, "cwd": cwd, "check": check})
        program = self.program(argv)
        if program in self.errors:
            raise self.errors[program]
        code = self.codes.get(program, 0)
        if check and code != 0:
            raise subprocess.CalledProcessError(code, argv)
        return (code, "", "")

    @staticmethod
    def program(argv: List[str]) -> str:
        if len(argv) > 2 and argv[1] == "-m":
            return argv[2]
        return argv[0]

    def commands(self, program: str) -> List[List[str]]:
        return [c["cmd"] for c in self.calls if self.program(c["cmd"]) == program]

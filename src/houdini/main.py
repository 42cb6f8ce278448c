"""Main entry point for the houdini secure erase tool."""

import sys
from typing import Callable, List, Optional

from .cli import CliOptions, parse_args
from .collect import DiskInfoProvider
from .commands import CommandRunner
from .config import Settings, load_settings
from .confirm import ConfirmationGate, GateState
from .environment import check_environment
from .errors import HoudiniError, UsageError
from .execute import EraseExecutor, run_execute_phase
from .plan import ParameterResolver
from .report import AuditLogger


def run_workflow(options: CliOptions, settings: Settings, provider: DiskInfoProvider,
                 executor: EraseExecutor, input_func: Callable[[str], str] = input) -> int:
    """Resolve, confirm, erase and log. Returns the process exit code."""
    # Phase 1: Resolve parameters
    resolver = ParameterResolver(provider, input_func)
    request = resolver.resolve(options)

    # Phase 2: Confirm
    gate = ConfirmationGate(provider, input_func)
    if gate.confirm(request) is not GateState.CONFIRMED:
        print("No secure erase was performed. Exiting.")
        return 1

    # Phase 3: Execute and log
    logger = AuditLogger.for_request(request, settings)
    operation = run_execute_phase(executor, request, logger)

    if logger.enabled:
        print(f"Log written to: {logger.path}")

    if not operation.succeeded:
        print(f"❌ Secure erase failed: {operation.error_message}")
        return 1

    if request.pretend:
        print("✅ Pretend run complete: no data was changed.")
    else:
        print("✅ Secure erase completed successfully!")
    return 0


def main(argv: Optional[List[str]] = None,
         provider: Optional[DiskInfoProvider] = None,
         executor: Optional[EraseExecutor] = None,
         input_func: Callable[[str], str] = input) -> int:
    """Main entry point."""
    try:
        options = parse_args(argv)
        settings = load_settings()
        check_environment(settings, pretend=options.pretend)

        runner = CommandRunner(timeout=settings.command_timeout)
        if provider is None:
            provider = DiskInfoProvider(runner)
        if executor is None:
            executor = EraseExecutor(runner, pretend_delay=settings.pretend_delay)

        return run_workflow(options, settings, provider, executor, input_func)

    except HoudiniError as e:
        print(f"❌ {e}")
        if isinstance(e, UsageError):
            print("Run 'houdini --help' for usage.")
        return e.exit_code
    except EOFError:
        print("\n❌ No input available. No secure erase was performed.")
        return 1
    except KeyboardInterrupt:
        print("\n❌ Interrupted by user. No further action taken.")
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()

"""Precondition checks on resolved upload options."""

from dataclasses import dataclass, field

from ui5uploader.config import LOCAL_PACKAGE, UploadOptions

MAX_BSP_NAME_LENGTH = 15


@dataclass
class ValidationResult:
    """Messages produced by validating upload options."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    information: list[str] = field(default_factory=list)

    @property
    def fatal(self) -> bool:
        return bool(self.errors)


def bsp_name(bsp_container: str) -> str:
    """Strip a namespace prefix such as ``/CUST/`` from a BSP container."""
    return bsp_container[bsp_container.rfind("/") + 1 :]


def validate_options(options: UploadOptions) -> ValidationResult:
    """
    Check options before any file is touched.

    Every rule is evaluated so the user sees all problems at once:
    1. Base dir and file pattern present
    2. Username and password present
    3. Package, BSP container and BSP container text present
    4. BSP name (without namespace) at most 15 characters
    5. Transport present unless the package is $TMP

    Strict SSL being active is reported as information.

    Args:
        options: Fully resolved options

    Returns:
        ValidationResult; ``fatal`` is set when any error was found
    """
    result = ValidationResult()

    if not options.base or not options.files:
        result.errors.append("Define both the base dir and files.")

    if not options.conn_user or not options.conn_password:
        result.errors.append("Define both a username and password.")

    if not options.abap_package or not options.abap_bsp or not options.abap_bsp_text:
        result.errors.append(
            "ABAP options not fully specified "
            "(check package, BSP container, BSP container text information)."
        )

    if options.abap_bsp and len(bsp_name(options.abap_bsp)) > MAX_BSP_NAME_LENGTH:
        result.errors.append(
            f"BSP name must not be longer than {MAX_BSP_NAME_LENGTH} characters."
        )

    if options.abap_package != LOCAL_PACKAGE and not options.abap_transport:
        result.errors.append("You should supply a transport.")

    if options.conn_usestrictssl:
        result.information.append("If HTTPS is used, strict SSL enabled!")

    return result

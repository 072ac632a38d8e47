# tpmkit

Building blocks for code that talks to a TPM 2.0 through the TPM2 software stack (TSS). The package has these modules:

- `tpmkit.context_config` holds configuration carriers for a TPM context.
  - `StartupMode` has the members `CLEAR`, `STATE` and `SKIP`.
  - `TctiStringConfig` holds a `name:args` TCTI string. Its default is an empty string.
  - `TpmContextConfig` holds a `tcti`, a `startup` mode and an optional `log` logger.
  - `TpmContextConfig.from_string(tcti_config, startup, log)` builds a configuration. It raises `TypeError` when the string or the startup mode has the wrong type.
- `tpmkit.log_record` defines the logging port.
  - `LogLevel` is the set of log levels.
  - `Logger` is an abstract base class with a single method, `log(level, message, fields)`.
  - `emit_outcome_record`, `emit_success_record` and `emit_failure_record` send records to a `Logger`. Each record starts with the fields `event`, `component` (always `tpm2_esys`) and `outcome`, followed by the fields you pass. Success records go out at `INFO` and failure records at `ERROR`. Given `None` as the logger, the success and failure helpers do nothing.
- `tpmkit.log_events` defines the logging schema.
  - `EventDescriptor` is a frozen dataclass holding a `name` and a `message`.
  - The event constants include `TSS_ERROR`, `PCR_TSS_ERROR`, `STARTUP_COMPLETED` and others.
  - The field keys (`FIELD_*`) and the standard values (`VALUE_*`) are constants in the same module.
- `tpmkit.return_codes` has TSS return-code constants and helpers.
  - The constants cover the layers, the base codes and a selection of TPM codes.
  - `rc_layer(rc)` returns the layer of a code.
  - `rc_base(rc, layer)` returns the base code. For TPM-layer codes in format one, it drops the handle, parameter and session selector bits.
  - `layer_name(layer)` returns `tpm`, `tcti`, `esapi`, `sys`, `mu` or `unknown`.
  - `format_rc(rc)` returns the code as hex, for example `0x000a000a`.
  - These helpers raise `TypeError` when the code is not an integer. They raise `ValueError` when the code is outside the 32-bit range.
- `tpmkit.error_translation` turns return codes into errors.
  - `ErrorCategory` has the members `INPUT_ERROR`, `SECURITY_FAILURE`, `RESOURCE_ERROR` and `BACKEND_ERROR`.
  - `TpmkitError` carries a `category` and a generic `message`.
  - `sanitize_backend_description(decoded)` cleans up a backend description. It cuts the text at the first NUL and caps it at 128 characters. It replaces non-printable characters with `_`, and it returns `unavailable` when nothing is left.
  - `translate_tss_rc(rc, operation, log, error_event, decoder)` handles a single return code, as described below.

## How `translate_tss_rc` works

A success code (`0`) returns `None`.

Any other code is first mapped to a category. The mapping uses a fixed table of TPM, ESAPI and TCTI codes. A code that is not in the table maps to `BACKEND_ERROR`.

When a logger is given, one failure record is logged under `error_event` (default `TSS_ERROR`). After the standard prefix, the record has these fields, in this order:

1. `error_category`
2. `error_code`
3. `backend_error_description`
4. `operation`
5. `tss_layer`

Finally, the function raises `TpmkitError`.

The description comes from `decoder(rc)`, cleaned by `sanitize_backend_description`:

- The default decoder names the layer and the base code, for example `tcti:io_error`.
- When `decoder` is `None`, the description is `unavailable`.

The exception message is always one of four fixed texts, for example "TPM operation cannot be completed". It never contains the return code. The code appears only in the log record.

## Installation

```
pip install tpmkit
```

With the test dependencies:

```
pip install "tpmkit[test]"
```

## Example

```python
from tpmkit.context_config import StartupMode, TpmContextConfig
from tpmkit.error_translation import ErrorCategory, TpmkitError, translate_tss_rc
from tpmkit.log_events import TSS_ERROR
from tpmkit.log_record import Logger


class PrintLogger(Logger):
    def log(self, level, message, fields):
        print(level.name, message, dict(fields))


config = TpmContextConfig.from_string("swtpm:port=2321", StartupMode.CLEAR, PrintLogger())

try:
    translate_tss_rc(0x000A000A, "tcti_init", config.log, TSS_ERROR, lambda rc: "IO failure")
except TpmkitError as exc:
    assert exc.category is ErrorCategory.RESOURCE_ERROR
```

## What this package does not do

- It does not open a TPM connection.
- It does not load TCTI modules or run TPM startup.
- It does not read or extend PCRs.

`TpmContextConfig` only describes a context. Nothing in the package creates one.

## Tests

```
pytest
```
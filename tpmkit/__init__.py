"""TPM2 context configuration, structured logging schema and TSS return-code translation."""

__version__ = "0.1.0"

__all__ = ["context_config", "error_translation", "log_events", "log_record", "return_codes"]
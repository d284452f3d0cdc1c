"""Service layer — every public operation returns a ServiceResult."""

"""Income tax, National Insurance and take-home calculators."""

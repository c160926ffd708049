"""Time Off Buddy: how many pay periods until the next dream vacation."""

"""Document exporters: PDF via reportlab, Excel via openpyxl and Word via python-docx."""

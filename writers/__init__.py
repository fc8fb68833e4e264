from .excel_writer import catalog_filename, catalog_headers, catalog_to_xlsx_bytes, write_catalog_xlsx

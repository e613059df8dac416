"""
SEN Import Pipeline
-------------------

CSV-to-database import of sacramental records.

Modules:
    - columns: Column layout of sacrament spreadsheets
    - normalizer: Cell cleanup and CSV reading
    - entity_resolver: Find-or-create of people, lookups, places, ledgers
    - import_service: Applies one row to the database
    - transaction: Commit-or-discard unit of work per row
    - sacrament_importer: File loop for sacrament spreadsheets
    - category_importer: File loop for event category lists
"""

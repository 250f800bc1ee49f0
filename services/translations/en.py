# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",
    "dialog.info": "Information",

    # Buttons
    "button.ok": "OK",
    "button.cancel": "Cancel",
    "button.back": "Back",
    "button.skip": "Skip",
    "button.finish": "Finish",
    "button.save": "Save",
    "button.browse": "Browse...",
    "button.remove": "Remove",
    "button.load": "Load",

    # Navigation
    "nav.onboarding": "Add Customer",
    "nav.bulk_import": "Bulk Upload",
    "nav.create_invoice": "Create Invoice",
    "nav.meter_reading": "Meter Reading",
    "nav.logout": "Sign out",
    "nav.logout_confirm": "Sign out of PropDesk?",

    # Onboarding wizard
    "wizard.title": "Add Customer",
    "wizard.progress": "Step {current} of {total}",
    "wizard.step.details": "Step 1: Customer Details",
    "wizard.step.invoice": "Step 2: Create Invoice",
    "wizard.step.utility": "Step 3: Utility Readings",
    "wizard.step.confirmation": "Step 4: Confirmation",
    "wizard.button.next_invoice": "Next: Create Invoice",
    "wizard.button.next_utility": "Next: Utility Readings",
    "wizard.button.next_confirmation": "Next: Confirmation",
    "wizard.button.creating": "Creating...",
    "wizard.button.saving": "Saving...",
    "wizard.invoice.hint": "Add invoice items if applicable. You can skip this step if no invoice is needed.",
    "wizard.invoice.add_item": "Add Item",
    "wizard.utility.hint": "Enter initial utility readings if applicable. You can skip this step if no readings are available.",
    "wizard.utility.add_reading": "Add Reading",
    "wizard.utility.column.type": "Utility Type",
    "wizard.utility.column.reading": "Reading",
    "wizard.utility.column.actions": "Actions",
    "wizard.confirmation.title": "Onboarding Complete",
    "wizard.confirmation.body": "Customer details, invoice (if provided), and utility readings (if provided) have been successfully saved.",
    "wizard.confirmation.hint": "Click \"Finish\" to view the customer details or \"Back\" to review utility readings.",

    # Customer form
    "customer.field.building": "Building",
    "customer.field.unit": "Unit",
    "customer.field.first_name": "First Name *",
    "customer.field.last_name": "Last Name *",
    "customer.field.email": "Email",
    "customer.field.phone": "Phone Number *",
    "customer.field.secondary_phone": "Secondary Phone Number",
    "customer.field.national_id": "National ID",

    # Building / unit selectors
    "selector.loading": "Loading...",
    "selector.select_building": "Select a building",
    "selector.select_unit": "Select a unit",
    "selector.no_units": "No units available",
    "selector.building_label": "{name} (Landlord: {landlord})",
    "selector.unknown_landlord": "Unknown",
    "selector.unit_occupied": "{unit} (Occupied)",

    # Validation
    "validation.first_name_required": "First name is required",
    "validation.last_name_required": "Last name is required",
    "validation.phone_required": "Phone number is required",
    "validation.phone_invalid": "Invalid phone number format",
    "validation.secondary_phone_invalid": "Invalid secondary phone number format",
    "validation.email_invalid": "Invalid email format",
    "validation.unit_occupied": "This unit is occupied and cannot be assigned",
    "validation.item_description_required": "Description is required",
    "validation.item_amount_invalid": "Valid amount is required",
    "validation.item_quantity_invalid": "Valid quantity is required",
    "validation.reading_invalid": "Reading must be a non-negative number",
    "validation.check_data": "Please correct the highlighted fields.",

    # Onboarding messages
    "message.customer_created": "Customer created successfully",
    "message.tenant_missing": "Tenant ID is missing. Please log in again.",
    "message.customer_missing": "Customer has not been created yet. Complete step 1 first.",
    "message.invoice_created": "Invoice created successfully",
    "message.no_invoice_items": "No invoice items provided. Proceeding to utility readings.",
    "message.invoice_skipped": "Invoice creation skipped",
    "message.readings_saved": "Utility readings saved successfully",
    "message.no_valid_readings": "No valid readings provided",
    "message.readings_skipped": "Utility readings skipped",
    "message.onboarding_completed": "Customer onboarding completed",

    # Error Messages
    "error.unauthorized": "Unauthorized. Redirecting to login...",
    "error.customer.invalid": "Invalid input. Please check your details.",
    "error.invoice.invalid": "Invalid invoice data.",
    "error.reading.invalid": "Invalid reading data.",
    "error.generic": "Something went wrong. Please try again later.",
    "error.network": "Network error. Please check your connection.",
    "error.buildings.load_failed": "Failed to load buildings",
    "error.units.load_failed": "Failed to load units",
    "error.render": "Error rendering page: {message}",
    "error.unknown": "Unknown error",

    # Bulk upload
    "upload.title": "Bulk Upload Customers",
    "upload.hint": "Upload a CSV or Excel (.xlsx) file of customers for the selected building. Maximum size {max_mb} MB.",
    "upload.select_file": "Select File",
    "upload.no_file": "No file selected",
    "upload.button": "Upload",
    "upload.uploading": "Uploading...",
    "upload.download_template": "Download Template",
    "upload.error.file_required": "Please select a file to upload",
    "upload.error.building_required": "Please select a building",
    "upload.error.file_missing": "File not found: {path}",
    "upload.error.file_type": "Invalid file type. Only CSV (text/csv) or Excel (.xlsx) files are allowed.",
    "upload.error.file_size": "File is too large. Maximum size is {max_mb} MB.",
    "upload.success": "Customers uploaded successfully",
    "upload.failed": "Failed to upload customers",
    "upload.template_saved": "Template saved to {path}",
    "upload.template_failed": "Failed to download template",
    "upload.errors_title": "Rows with errors",
    "upload.column.row": "Row",
    "upload.column.reason": "Reason",

    # Standalone invoice
    "invoice.title": "Create Invoice",
    "invoice.search_placeholder": "Search customer by name or phone number",
    "invoice.no_customer_phone": "No customer found with that phone number",
    "invoice.no_customer_name": "No customer found with that name",
    "invoice.search_error": "Error searching customers: {message}",
    "invoice.selected": "Selected customer: {name}",
    "invoice.none_selected": "No customer selected",
    "invoice.field.description": "Description",
    "invoice.field.amount": "Amount",
    "invoice.field.quantity": "Quantity",
    "invoice.column.total": "Total",
    "invoice.column.actions": "Actions",
    "invoice.total_na": "N/A",
    "invoice.add_item": "Add Item",
    "invoice.item_fields_required": "Please fill in all item fields",
    "invoice.amount_invalid": "Amount must be a positive number",
    "invoice.quantity_invalid": "Quantity must be a positive integer",
    "invoice.item_added": "Item added successfully",
    "invoice.item_removed": "Item removed successfully",
    "invoice.select_customer": "Please select a customer",
    "invoice.items_required": "At least one invoice item is required for customers without a unit",
    "invoice.create": "Create Invoice",
    "invoice.created": "Invoice created successfully!",
    "invoice.create_failed": "Failed to create invoice. Please try again.",
    "invoice.generate_all": "Generate Invoices for All",
    "invoice.generate_confirm": "Generate invoices for all active customers? This cannot be undone.",
    "invoice.generated": "Invoices generated successfully for all active customers!",
    "invoice.generate_failed": "Failed to generate invoices. Please try again.",

    # Meter reading review
    "meter.title": "Meter Reading Details",
    "meter.reading_id": "Reading ID",
    "meter.load_failed": "Failed to fetch meter reading details.",
    "meter.not_found": "No meter reading loaded.",
    "meter.abnormal_banner": "You need to manually intervene and update the meter reading because the consumption has been flagged as abnormal.",
    "meter.factor": "Consumption is {factor}x the average consumption",
    "meter.field.customer": "Customer",
    "meter.field.reading": "Reading",
    "meter.field.consumption": "Consumption",
    "meter.field.average": "Average consumption",
    "meter.field.photo_url": "Meter photo URL",
    "meter.field.reviewed": "Reviewed",
    "meter.field.review_notes": "Review notes",
    "meter.field.resolved": "Resolved",
    "meter.update_values": "Update Values",
    "meter.update_anomaly": "Update Anomaly Review",
    "meter.values_invalid": "Reading and consumption must be valid numbers.",
    "meter.values_updated": "Meter reading values updated successfully!",
    "meter.values_failed": "Failed to update meter reading values.",
    "meter.anomaly_updated": "Anomaly details updated successfully!",
    "meter.anomaly_failed": "Failed to update anomaly details.",

    # Customer summary
    "customer.details.title": "Customer Details",
    "customer.details.load_failed": "Failed to load customer details.",
    "customer.details.email": "Email",
    "customer.details.phone": "Phone",
    "customer.details.secondary_phone": "Secondary Phone",
    "customer.details.national_id": "National ID",
    "customer.details.unit": "Unit",
    "customer.details.building": "Building",
    "customer.details.closing_balance": "Closing Balance",
    "customer.details.status": "Status",
    "customer.details.na": "N/A",
    "customer.details.not_assigned": "Not Assigned",
    "customer.details.add_another": "Add Another Customer",

    # Login
    "login.title": "Sign in",
    "login.email": "Email",
    "login.password": "Password",
    "login.submit": "Sign in",
    "login.required": "Please enter your email and password",
    "login.failed": "Invalid email or password",
}

"""Reusable widgets: tables, filters, toasts, status bar, menus, cards and dialogs."""
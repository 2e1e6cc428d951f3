# UI.py
""""PySide6 user interface for the derivative calculator.

Structure
---------
- Calculator UI: main window with command line, history and command buttons
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, history pane, input line and buttons
- Dispatch command lines to Calculator.execute in a worker thread
- Append results to the history and show engine errors as dialogs
- Clipboard integration (copy last output / paste + optional auto-run)
- Dark/light mode

Responsibilities (Settings)
---------------------------
- Load current settings and their descriptions via config_manager
- Validate user input (precision must be at least 1)
- Save and apply theme changes immediately

Threading Note
--------------
Commands run off the UI thread in Worker(QObject); the result (or error)
comes back through a Qt signal and is handled in the UI thread.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import QObject, Signal
import sys
import threading
from pynput.keyboard import Controller
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from .Calculator import Calculator


# (button text, command word inserted into the input line)
COMMAND_BUTTONS = [
    ("DER", "DER "),
    ("PRINT", "PRINT "),
    ("EVAL", "EVAL "),
    ("SAVE", "SAVE "),
]


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used to switch the clipboard button from copy to paste.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class Worker(QObject):
    """""

    Runs one command line against the shared Calculator in a separate thread and
    emits job_finished(result_or_error, command_line) back to the UI.

    """""

    job_finished = Signal(object, str)

    def __init__(self, calculator, command_line):
        super().__init__()
        self.calculator = calculator
        self.command_line = command_line

    def run_command(self):

        try:
            result = self.calculator.execute(self.command_line)
            self.job_finished.emit(result, self.command_line)

        except E.MathError as e:
            # Known, handled error (e.g. "Invalid expression")
            self.job_finished.emit(e, self.command_line)

        except Exception as e:
            # Unexpected crash we didn't plan for
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.command_line
            )
            self.job_finished.emit(critical_error, self.command_line)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Booleans are edited with checkboxes, integers with input fields;
    descriptions come from ui_strings.json.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> widget

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 200)
        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 1):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))
                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # Left blank: keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "precision" and new_value_int < 1:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 1.")
                    setting_value_list[key_value] = new_value_int

                except ValueError as e:
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
            self.update_darkmode()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State ---
        self.calculator = Calculator()
        self.last_output = ""
        self.thread_active = False
        self.workers = []  # Keeps running workers alive until they report back

        # --- 3. Window Setup ---
        self.setWindowTitle("Derivative Calculator")
        self.resize(520, 420)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # --- 4. History ---
        self.history = QtWidgets.QPlainTextEdit()
        self.history.setReadOnly(True)
        main_v_layout.addWidget(self.history, 3)

        # --- 5. Input line ---
        self.command_input = QtWidgets.QLineEdit()
        self.command_input.setPlaceholderText("EXPR sin(x) * x ^ 2")
        self.command_input.returnPressed.connect(self.run_current_command)
        main_v_layout.addWidget(self.command_input)

        # --- 6. Buttons ---
        button_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(button_row)
        self.button_objects = {}

        for text, command_word in COMMAND_BUTTONS:
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(lambda checked=False, word=command_word: self.insert_command_word(word))
            button_row.addWidget(button)
            self.button_objects[text] = button

        clipboard_button = QtWidgets.QPushButton("Copy")
        clipboard_button.setToolTip("Copy last output (Shift: paste into the input line)")
        clipboard_button.clicked.connect(self.handle_clipboard)
        button_row.addWidget(clipboard_button)
        self.button_objects["Copy"] = clipboard_button

        settings_button = QtWidgets.QPushButton("Settings")
        settings_button.clicked.connect(self.open_settings)
        button_row.addWidget(settings_button)
        self.button_objects["Settings"] = settings_button

        run_button = QtWidgets.QPushButton("Run")
        run_button.clicked.connect(self.run_current_command)
        button_row.addWidget(run_button)
        self.button_objects["Run"] = run_button

        self.update_darkmode()

    def insert_command_word(self, command_word):
        # Replace a leading command word, keep the arguments
        current_text = self.command_input.text().strip()
        parts = current_text.split(maxsplit=1)
        if parts and parts[0].upper() in [word.strip() for _, word in COMMAND_BUTTONS] + ["EXPR"]:
            current_text = parts[1] if len(parts) > 1 else ""
        self.command_input.setText(command_word + current_text)
        self.command_input.setFocus()

    def handle_clipboard(self):
        if is_shift_pressed():
            clipboard_text = QtWidgets.QApplication.clipboard().text()
            if not clipboard_text:
                return
            self.command_input.setText(self.command_input.text() + clipboard_text)
            if self.setting_value_list["after_paste_enter"] == True:
                self.run_current_command()
        elif self.last_output:
            pyperclip.copy(self.last_output)

    def run_current_command(self):
        command_line = self.command_input.text().strip()
        if not command_line:
            return
        if self.thread_active:
            self.show_error(E.MathError("Command already Running!", code="4002", equation=command_line))
            return

        self.thread_active = True
        self.update_run_button()

        worker_instance = Worker(self.calculator, command_line)
        worker_instance.job_finished.connect(self.command_result)
        self.workers.append(worker_instance)
        my_thread = threading.Thread(target=worker_instance.run_command)
        my_thread.start()

    def command_result(self, result, command_line):
        self.thread_active = False
        self.update_run_button()
        self.workers = [worker for worker in self.workers if worker.command_line != command_line]

        if isinstance(result, E.MathError):
            self.show_error(result)
            return

        self.history.appendPlainText(f"> {command_line}")
        if result is not None:
            self.history.appendPlainText(result)
            self.last_output = result
        self.command_input.clear()

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_code = error_obj.code
        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Calculation error")
        error_box.setText(f"Error {error_code}: {error_obj.message}")
        error_box.setInformativeText(f"Input: {error_obj.equation}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def update_run_button(self):
        run_button = self.button_objects["Run"]
        if self.thread_active == True:
            run_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            run_button.setText("X")
        else:
            run_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            run_button.setText("Run")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != "Run":
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.history.setStyleSheet("background-color: #121212; color: white;")
            self.command_input.setStyleSheet("background-color: #2e2e2e; color: white;")
        else:
            for text, button in self.button_objects.items():
                if text != "Run":
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.history.setStyleSheet("")
            self.command_input.setStyleSheet("")
        self.update_run_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        # Reload so changes (like darkmode) apply right away
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        return ""


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

from ..ai import Difficulty
from ..controller import DEFAULT_DIFFICULTY, DEFAULT_PLAYER_NAME, GameController
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QComboBox, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

class TicTacToeWindow(QMainWindow):
    """
    main window: settings, board, status line
    """
    def __init__(self, controller=None, player_name=DEFAULT_PLAYER_NAME,
                 difficulty=DEFAULT_DIFFICULTY):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = controller or GameController(parent=self)
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui(player_name, difficulty)
        # controller -> view
        self.controller.board_changed.connect(self.board_widget.set_board)
        self.controller.status_changed.connect(self._update_message)
        self.controller.game_finished.connect(self._on_game_finished)
        # view -> controller
        self.board_widget.cell_clicked.connect(self.controller.human_move)

        self.board_widget.set_board(self.controller.board, True)
        self._update_message("Click Start.")

    def _setup_ui(self, player_name, difficulty):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()                          # top menu
        self._create_settings(player_name, difficulty)   # name + difficulty
        self.main_layout.addWidget(self.settings_group)
        self.main_layout.addWidget(self.board_widget, 1)

        self._create_bottom_controls()                   # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        start_action = QAction("New Game", self)
        start_action.triggered.connect(self.start_game)
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.controller.restart)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (start_action, restart_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_settings(self, player_name, difficulty):
        '''player name, difficulty, start button'''
        self.settings_group = QGroupBox("New Game")
        layout = QHBoxLayout()
        layout.addWidget(QLabel("Name:"))
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText(DEFAULT_PLAYER_NAME)
        if player_name != DEFAULT_PLAYER_NAME: self.name_input.setText(player_name)
        layout.addWidget(self.name_input)
        layout.addWidget(QLabel("Difficulty:"))
        self.difficulty_combo = QComboBox()
        for diff in Difficulty:
            self.difficulty_combo.addItem(diff.value.capitalize(), diff.value)
        self.difficulty_combo.setCurrentIndex(self.difficulty_combo.findData(difficulty.value))
        layout.addWidget(self.difficulty_combo)
        self.start_button = QPushButton("Start")
        self.start_button.clicked.connect(self.start_game)
        layout.addWidget(self.start_button)
        self.settings_group.setLayout(layout)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.controller.restart)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.restart_button)

    def current_settings(self):
        # (name, difficulty) as typed/selected in the form
        return self.name_input.text(), Difficulty(self.difficulty_combo.currentData())

    @Slot()
    def start_game(self):
        name, difficulty = self.current_settings()
        self.controller.start(name, difficulty)

    @Slot(str)
    def _update_message(self, text):
        # status line; highlight results
        style = "color: #eee;"
        if text.endswith("wins!") or text == "Tie game.":
            style = "color: lime; font-weight: bold;"
        elif text.endswith("'s turn"):
            style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(object)
    def _on_game_finished(self, winner):
        # enter replays straight away
        self.restart_button.setDefault(True)
        self.restart_button.setFocus()

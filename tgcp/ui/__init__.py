"""Messages, banner and help overlay of the terminal interface."""
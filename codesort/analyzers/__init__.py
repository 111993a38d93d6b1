"""Line-by-line analyzers of Rust, Java and JavaScript code."""